import logging

import customtkinter as ctk

from services.budget_service import BudgetService
from services.category_service import CategoryService
from services.report_service import ReportService
from ui.components.category_form import CategoryForm
from ui.components.confirm_dialog import ConfirmDialog
from utils.constants import CATEGORY_ICON_GLYPHS, FALLBACK_ICON_GLYPH
from utils.currency import format_currency
from utils.date_helpers import friendly_range

logger = logging.getLogger(__name__)


class CategoriesTab(ctk.CTkFrame):
    def __init__(
        self,
        master,
        category_service: CategoryService,
        budget_service: BudgetService,
        report_service: ReportService,
        notify_refresh,   # callable(scope)
        notify_error,     # callable(message)
        **kwargs,
    ):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._svc = category_service
        self._budget_svc = budget_service
        self._report_svc = report_service
        self._notify_refresh = notify_refresh
        self._notify_error = notify_error

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._build_toolbar()
        self._build_list()
        self._load()

    def refresh(self):
        self._load()

    def _build_toolbar(self):
        bar = ctk.CTkFrame(self, fg_color=("gray88", "gray18"), corner_radius=8)
        bar.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 0))

        ctk.CTkLabel(
            bar, text="Manage your spending categories and budgets",
            font=ctk.CTkFont(size=13, weight="bold"),
        ).pack(side="left", padx=(12, 16), pady=8)

        ctk.CTkButton(
            bar, text="+ Add Category", command=self._open_add,
        ).pack(side="right", padx=8, pady=6)

    def _build_list(self):
        self._scroll = ctk.CTkScrollableFrame(self)
        self._scroll.grid(row=1, column=0, sticky="nsew", padx=8, pady=8)
        self._scroll.grid_columnconfigure(0, weight=1)

    def _load(self):
        for w in self._scroll.winfo_children():
            w.destroy()

        categories = self._svc.get_all()
        if not categories:
            ctk.CTkLabel(
                self._scroll,
                text="No categories yet. Click '+ Add Category' to create one.",
                text_color="gray60",
            ).grid(row=0, column=0, pady=40)
            return

        goals = {g.category_id: g for g in self._budget_svc.get_all()}
        counts = self._report_svc.get_expense_counts()
        for idx, cat in enumerate(categories):
            self._add_row(idx, cat, goals.get(cat.id), counts.get(cat.id, 0))

    def _add_row(self, idx, cat, goal, expense_count):
        row = ctk.CTkFrame(self._scroll, fg_color=("gray90", "gray20"), corner_radius=8)
        row.grid(row=idx, column=0, sticky="ew", padx=4, pady=3)
        row.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(
            row, text=CATEGORY_ICON_GLYPHS.get(cat.icon, FALLBACK_ICON_GLYPH),
            width=34, height=34, corner_radius=17,
            fg_color=cat.color, text_color="white",
            font=ctk.CTkFont(size=16),
        ).grid(row=0, column=0, rowspan=2, padx=(10, 0), pady=8)

        ctk.CTkLabel(
            row, text=cat.name,
            font=ctk.CTkFont(size=13, weight="bold"), anchor="w",
        ).grid(row=0, column=1, padx=10, pady=(8, 0), sticky="w")
        if goal and goal.limit:
            period = friendly_range(goal.start_date, goal.end_date)
            budget_text = format_currency(goal.limit) + (f" ({period})" if period else "")
        else:
            budget_text = "Not set"
        ctk.CTkLabel(
            row,
            text=f"Budget: {budget_text}   ·   {expense_count} expense{'s' if expense_count != 1 else ''}",
            text_color="gray60", font=ctk.CTkFont(size=11), anchor="w",
        ).grid(row=1, column=1, padx=10, pady=(0, 8), sticky="w")

        btn_frame = ctk.CTkFrame(row, fg_color="transparent")
        btn_frame.grid(row=0, column=2, rowspan=2, padx=(4, 10), pady=6)
        ctk.CTkButton(
            btn_frame, text="Edit", width=60, height=26,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=lambda c=cat: self._open_edit(c),
        ).pack(side="left", padx=(0, 4))
        ctk.CTkButton(
            btn_frame, text="Delete", width=65, height=26,
            fg_color="#F44336", hover_color="#D32F2F",
            command=lambda c=cat, n=expense_count: self._on_delete(c, n),
        ).pack(side="left")

    def _open_add(self):
        form = CategoryForm(self.winfo_toplevel(), self._svc, self._budget_svc)
        self.wait_window(form)
        if form.saved:
            self._notify_refresh("category")

    def _open_edit(self, cat):
        form = CategoryForm(self.winfo_toplevel(), self._svc, self._budget_svc, category=cat)
        self.wait_window(form)
        if form.saved:
            self._notify_refresh("category")

    def _on_delete(self, cat, expense_count: int):
        detail = f" and its {expense_count} associated expense(s)" if expense_count else ""
        dlg = ConfirmDialog(
            self.winfo_toplevel(),
            title="Are you sure?",
            message=(
                f"This action cannot be undone. This will permanently delete "
                f"the category '{cat.name}'{detail}."
            ),
        )
        if not dlg.result:
            return
        try:
            self._svc.delete(cat.id)
        except ValueError as e:
            logger.error("Failed to delete category %s: %s", cat.id, e)
            self._notify_error(f"Could not delete '{cat.name}': {e}")
        self._notify_refresh("category")
