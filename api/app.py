"""Flask REST API exposing the expense tracker services."""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request
from flask_cors import CORS

from expense_tracker.display import CATEGORY_STYLES, category_breakdown, category_label
from moneyflow.exceptions import RecordNotFoundError, ValidationError
from moneyflow.models import CATEGORIES
from moneyflow.queries import FilterCriteria
from moneyflow.services import ExpenseTracker

TRUTHY = {"1", "true", "yes", "on"}


def create_app(tracker: Optional[ExpenseTracker] = None, seed: Optional[bool] = None) -> Flask:
    app = Flask(__name__)

    env_name = os.getenv("MONEYFLOW_ENV", "prod").lower()
    is_dev = env_name in {"dev", "development"}
    if is_dev:
        CORS(app, resources={r"/*": {"origins": "*"}}, supports_credentials=True)
    else:
        allowed_origins = os.getenv("MONEYFLOW_ALLOWED_ORIGINS")
        if allowed_origins:
            origins = [origin.strip() for origin in allowed_origins.split(",") if origin.strip()]
            CORS(app, resources={r"/*": {"origins": origins}}, supports_credentials=True)
        else:
            CORS(app)

    if seed is None:
        raw_seed = os.getenv("MONEYFLOW_SEED_SAMPLES")
        seed = raw_seed.strip().lower() in TRUTHY if raw_seed is not None else is_dev

    if tracker is None:
        tracker = ExpenseTracker()
        if seed:
            tracker.seed_sample_data()
            app.logger.info("Seeded sample expenses")
    app.extensions["moneyflow"] = tracker

    def _success(payload: Any, status: int = 200):
        if status == 204:
            return ("", status)
        return jsonify(payload), status

    def _handle_error(exc: Exception, status: int, message: str, code: str):
        app.logger.error("%s: %s", message, exc)
        return jsonify({"error": message, "code": code, "details": str(exc)}), status

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError):
        return _handle_error(exc, 400, "Validation error", exc.code)

    @app.errorhandler(RecordNotFoundError)
    def handle_not_found(exc: RecordNotFoundError):
        return _handle_error(exc, 404, "Record not found", "not_found")

    def _json_body() -> Dict[str, Any]:
        if not request.is_json:
            raise ValidationError("Request content must be application/json")
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Malformed JSON body")
        return data

    def _criteria() -> FilterCriteria:
        return FilterCriteria.parse(
            category=request.args.get("category"),
            month=request.args.get("month"),
        )

    def _get_or_raise(expense_id: int):
        expense = tracker.get_expense(expense_id)
        if expense is None:
            raise RecordNotFoundError(f"Expense {expense_id} not found")
        return expense

    @app.get("/categories")
    def list_categories():
        items = [
            {
                "value": tag,
                "label": CATEGORY_STYLES[tag].label,
                "emoji": CATEGORY_STYLES[tag].emoji,
                "color": CATEGORY_STYLES[tag].color,
            }
            for tag in CATEGORIES
        ]
        return _success({"items": items})

    @app.get("/expenses")
    def list_expenses():
        criteria = _criteria()
        expenses = tracker.get_filtered(criteria)
        summary = tracker.get_summary(criteria)
        return _success({
            "items": [expense.to_dict() for expense in expenses],
            "count": summary.count,
            "total": f"{summary.total:.2f}",
        })

    @app.post("/expenses")
    def create_expense():
        payload = _json_body()
        expense = tracker.submit(payload)
        app.logger.info("Created expense %s", expense.id)
        return _success(expense.to_dict(), 201)

    @app.get("/expenses/<int:expense_id>")
    def get_expense(expense_id: int):
        return _success(_get_or_raise(expense_id).to_dict())

    @app.put("/expenses/<int:expense_id>")
    def update_expense(expense_id: int):
        payload = _json_body()
        expense = tracker.submit(payload, expense_id=expense_id)
        app.logger.info("Updated expense %s", expense_id)
        return _success(expense.to_dict())

    @app.delete("/expenses/<int:expense_id>")
    def delete_expense(expense_id: int):
        # Clients confirm with the user before issuing DELETE.
        if not tracker.remove_expense(expense_id):
            raise RecordNotFoundError(f"Expense {expense_id} not found")
        app.logger.info("Deleted expense %s", expense_id)
        return _success({}, 204)

    @app.get("/summary")
    def summary():
        criteria = _criteria()
        result = tracker.get_summary(criteria)
        payload = result.to_dict()
        payload["top_category"]["label"] = category_label(result.top_category[0])
        payload["breakdown"] = [
            {
                "category": tag,
                "label": category_label(tag),
                "amount": f"{amount:.2f}",
                "percentage": f"{share:.1f}",
            }
            for tag, amount, share in category_breakdown(result)
        ]
        payload["filter"] = {"category": criteria.category, "month": criteria.month}
        return _success(payload)

    @app.get("/months")
    def list_months():
        return _success({"items": tracker.get_month_options()})

    return app
