import logging
import os
import sys
import customtkinter as ctk

# Ensure project root is on sys.path when run directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from store.memory_store import MemoryStore
from store.category_dao import CategoryDAO
from store.expense_dao import ExpenseDAO
from store.budget_dao import BudgetGoalDAO

from services.budget_service import BudgetService
from services.category_service import CategoryService
from services.expense_service import ExpenseService
from services.report_service import ReportService

from ui.app_window import AppWindow
from utils.app_config import get_log_level, get_setting

logger = logging.getLogger(__name__)


def configure_logging():
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def main():
    configure_logging()

    # ── Store ────────────────────────────────────────────────────────────────
    store = MemoryStore.open_default()

    # ── DAOs ─────────────────────────────────────────────────────────────────
    category_dao = CategoryDAO(store)
    expense_dao = ExpenseDAO(store)
    budget_dao = BudgetGoalDAO(store)

    # ── Services ─────────────────────────────────────────────────────────────
    budget_svc = BudgetService(budget_dao, category_dao, store)
    category_svc = CategoryService(category_dao, expense_dao, budget_dao, budget_svc, store)
    expense_svc = ExpenseService(expense_dao, store)
    report_svc = ReportService(category_dao, expense_dao, budget_dao, store)

    # ── Appearance ───────────────────────────────────────────────────────────
    appearance = get_setting("appearance_mode")
    date_format = get_setting("date_format")
    ctk.set_appearance_mode(appearance)
    ctk.set_default_color_theme("blue")

    # ── Launch UI ────────────────────────────────────────────────────────────
    logger.info(
        "Starting dashboard (latency simulation %s)",
        "on" if store.simulate_latency else "off",
    )
    app = AppWindow(
        category_service=category_svc,
        expense_service=expense_svc,
        budget_service=budget_svc,
        report_service=report_svc,
        date_format=date_format,
    )
    app.mainloop()


if __name__ == "__main__":
    main()
