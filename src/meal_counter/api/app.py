"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from meal_counter.api.admin import router as admin_router
from meal_counter.api.meals import router as meals_router
from meal_counter.app_logging import configure_logging
from meal_counter.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state_container: AppContainer = app.state.container
        if state_container.settings.archive_on_startup:
            try:
                result = state_container.archive_service.run_sweep()
                if result.skipped:
                    logger.info("Archive up to date")
                elif result.success:
                    logger.info("Auto-archived %s records", result.archived)
                else:
                    logger.error("Boot-time archive failed: %s", result.error)
            except Exception:
                logger.exception("Boot-time archive check crashed")
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(meals_router)
    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    async def counter_page() -> HTMLResponse:
        """Single-page counter form backed by the JSON API."""
        return HTMLResponse(_COUNTER_PAGE_HTML)

    return app


_COUNTER_PAGE_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Meal Counter</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      h1 { margin-bottom: 0.5rem; }
      .row { margin-bottom: 1rem; }
      input, select { padding: 0.4rem 0.6rem; margin-right: 0.5rem; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      pre { background: #f6f6f6; padding: 1rem; white-space: pre-wrap; }
      table { border-collapse: collapse; }
      td, th { border-bottom: 1px solid #ddd; padding: 0.3rem 0.8rem; }
    </style>
  </head>
  <body>
    <h1>Meal Counter</h1>
    <div class="row">
      <input id="employee" placeholder="Employee ID" />
      <select id="mealType">
        <option value="MORNING">Morning</option>
        <option value="EVENING">Evening</option>
      </select>
      <select id="counter">
        <option value="1">Counter 1</option>
        <option value="2">Counter 2</option>
        <option value="3">Counter 3</option>
      </select>
    </div>
    <div class="row">
      <button onclick="provideMeal()">Provide Meal</button>
      <button onclick="checkEligibility()">Check Eligibility</button>
      <button onclick="loadToday()">Manual Sync</button>
      <button onclick="loadHistory()">History</button>
    </div>
    <pre id="output">Ready.</pre>
    <h2 id="tableTitle">Today's meals</h2>
    <table>
      <thead>
        <tr><th>Date</th><th>Employee</th><th>Meal</th><th>Counter</th><th>Time</th></tr>
      </thead>
      <tbody id="rows"></tbody>
    </table>
    <script>
      const output = document.getElementById('output');

      function employeeId() {
        const value = document.getElementById('employee').value.trim();
        if (!value) {
          output.textContent = 'Please enter employee ID';
        }
        return value;
      }

      function renderRows(title, records) {
        document.getElementById('tableTitle').textContent = title;
        const body = document.getElementById('rows');
        body.innerHTML = '';
        for (const r of records) {
          const tr = document.createElement('tr');
          for (const v of [r.date, r.employee_id, r.meal_type, r.counter_id,
                           new Date(r.timestamp).toLocaleTimeString()]) {
            const td = document.createElement('td');
            td.textContent = v;
            tr.appendChild(td);
          }
          body.appendChild(tr);
        }
      }

      async function provideMeal() {
        const id = employeeId();
        if (!id) return;
        const res = await fetch('/meals', {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify({
            employee_id: id,
            meal_type: document.getElementById('mealType').value,
            counter_id: Number(document.getElementById('counter').value),
          }),
        });
        const data = await res.json();
        if (res.status === 201) {
          output.textContent = 'Meal provided: ' + data.employee_id + ' / ' +
            data.meal_type + ' / Counter ' + data.counter_id;
          document.getElementById('employee').value = '';
          await loadToday();
        } else {
          output.textContent = 'Error: ' + (data.error || JSON.stringify(data));
        }
      }

      async function checkEligibility() {
        const id = employeeId();
        if (!id) return;
        const res = await fetch('/meals/eligibility/' + encodeURIComponent(id));
        const data = await res.json();
        if (!res.ok) {
          output.textContent = 'Error: ' + data.error;
        } else if (data.eligible) {
          output.textContent = 'Employee ' + id + ' is ELIGIBLE for a meal';
        } else {
          output.textContent = 'Employee ' + id + ' already received a meal today (' +
            data.meal_type + ' at Counter ' + data.counter_id + ')';
        }
      }

      async function loadToday() {
        const res = await fetch('/meals/today');
        const data = await res.json();
        if (!res.ok) {
          output.textContent = 'Error: ' + data.error;
          return;
        }
        renderRows("Today's meals (" + data.count + ')', data.meals);
      }

      async function loadHistory() {
        const id = employeeId();
        if (!id) return;
        const res = await fetch('/employees/' + encodeURIComponent(id) + '/history');
        const data = await res.json();
        if (!res.ok) {
          output.textContent = 'Error: ' + data.error;
          return;
        }
        output.textContent = 'Showing ' + data.count + ' past meal records for ' + id;
        renderRows('History for ' + id, data.records);
      }

      loadToday();
    </script>
  </body>
</html>
"""
