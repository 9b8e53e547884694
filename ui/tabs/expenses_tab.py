import logging

import customtkinter as ctk

from models.expense import Expense
from services.category_service import CategoryService
from services.expense_service import ExpenseService, filter_expenses
from ui.components.confirm_dialog import ConfirmDialog
from ui.components.expense_form import ExpenseForm
from utils.constants import CATEGORY_ICON_GLYPHS, FALLBACK_ICON_GLYPH
from utils.currency import format_currency
from utils.date_helpers import format_display_date

logger = logging.getLogger(__name__)

_MAX_RENDERED_ROWS = 100


class ExpensesTab(ctk.CTkFrame):
    def __init__(
        self,
        master,
        expense_service: ExpenseService,
        category_service: CategoryService,
        notify_refresh,   # callable(scope)
        notify_error,     # callable(message)
        date_format: str = "MM/DD/YYYY",
        **kwargs,
    ):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._svc = expense_service
        self._cat_svc = category_service
        self._notify_refresh = notify_refresh
        self._notify_error = notify_error
        self._date_format = date_format
        self._categories = []
        self._expenses = []

        self._search_var = ctk.StringVar()
        self._search_var.trace_add("write", lambda *_: self._render())

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(2, weight=1)

        self._build_toolbar()
        self._build_header()
        self._build_list()
        self._load()

    def refresh(self):
        self._load()

    def _build_toolbar(self):
        bar = ctk.CTkFrame(self, fg_color=("gray88", "gray18"), corner_radius=8)
        bar.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 0))
        ctk.CTkLabel(
            bar, text="Recent Expenses",
            font=ctk.CTkFont(size=13, weight="bold"),
        ).pack(side="left", padx=(12, 16), pady=8)
        ctk.CTkEntry(
            bar, textvariable=self._search_var,
            placeholder_text="Search…", width=180,
        ).pack(side="left", padx=4)
        ctk.CTkButton(bar, text="+ Add Expense", command=self._open_add).pack(
            side="right", padx=8, pady=6
        )

    def _build_header(self):
        hdr = ctk.CTkFrame(self, fg_color="transparent")
        hdr.grid(row=1, column=0, sticky="ew", padx=14, pady=(6, 0))
        for col, (text, width, anchor) in enumerate([
            ("Date", 100, "w"), ("Description", 220, "w"), ("Category", 170, "w"),
            ("Amount", 100, "e"), ("Actions", 140, "center"),
        ]):
            ctk.CTkLabel(
                hdr, text=text, width=width, anchor=anchor,
                text_color="gray60", font=ctk.CTkFont(size=11),
            ).grid(row=0, column=col, padx=4)

    def _build_list(self):
        self._scroll = ctk.CTkScrollableFrame(self)
        self._scroll.grid(row=2, column=0, sticky="nsew", padx=8, pady=8)
        self._scroll.grid_columnconfigure(0, weight=1)

    def _load(self):
        self._categories = self._cat_svc.get_all()
        self._expenses = self._svc.get_recent()
        self._render()

    def _render(self):
        """Redraw from the last fetched lists; search filters without re-reading."""
        for w in self._scroll.winfo_children():
            w.destroy()

        by_id = {c.id: c for c in self._categories}
        expenses = filter_expenses(self._expenses, self._categories, self._search_var.get())

        if not expenses:
            ctk.CTkLabel(
                self._scroll, text="No expenses recorded yet.", text_color="gray60",
            ).grid(row=0, column=0, pady=20)
            return

        for idx, expense in enumerate(expenses[:_MAX_RENDERED_ROWS]):
            self._add_row(idx, expense, by_id.get(expense.category_id))

        if len(expenses) > _MAX_RENDERED_ROWS:
            ctk.CTkLabel(
                self._scroll,
                text=f"Showing {_MAX_RENDERED_ROWS} of {len(expenses)} expenses. Use search to narrow results.",
                text_color="gray60",
                font=ctk.CTkFont(size=11),
            ).grid(row=_MAX_RENDERED_ROWS, column=0, pady=8)

    def _add_row(self, idx: int, expense: Expense, category):
        bg = ("gray92", "gray17") if idx % 2 == 0 else ("gray88", "gray21")
        row = ctk.CTkFrame(self._scroll, fg_color=bg, corner_radius=4)
        row.grid(row=idx, column=0, sticky="ew", pady=1, padx=2)

        ctk.CTkLabel(
            row, text=format_display_date(expense.date, self._date_format), width=100, anchor="w"
        ).grid(row=0, column=0, padx=4, pady=4)
        ctk.CTkLabel(row, text=expense.description, width=220, anchor="w").grid(
            row=0, column=1, padx=4
        )
        if category:
            glyph = CATEGORY_ICON_GLYPHS.get(category.icon, FALLBACK_ICON_GLYPH)
            ctk.CTkLabel(
                row, text=f"{glyph} {category.name}", width=170, anchor="w",
                text_color=category.color,
            ).grid(row=0, column=2, padx=4)
        else:
            ctk.CTkLabel(
                row, text="Uncategorized", width=170, anchor="w", text_color="gray60",
            ).grid(row=0, column=2, padx=4)
        ctk.CTkLabel(
            row, text=format_currency(expense.amount), width=100, anchor="e",
        ).grid(row=0, column=3, padx=4)

        acts = ctk.CTkFrame(row, fg_color="transparent", width=140)
        acts.grid(row=0, column=4, padx=4)
        ctk.CTkButton(
            acts, text="Edit", width=54, height=24,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=lambda e=expense: self._open_edit(e),
        ).pack(side="left", padx=2)
        ctk.CTkButton(
            acts, text="Delete", width=60, height=24,
            fg_color="#F44336", hover_color="#D32F2F",
            command=lambda e=expense: self._on_delete(e),
        ).pack(side="left", padx=2)

    def _open_add(self):
        if not self._categories:
            self._notify_error("Add a category before recording expenses.")
            return
        form = ExpenseForm(
            self.winfo_toplevel(), self._svc, self._categories,
            date_format=self._date_format,
        )
        self.wait_window(form)
        if form.saved:
            self._notify_refresh("expense")

    def _open_edit(self, expense: Expense):
        form = ExpenseForm(
            self.winfo_toplevel(), self._svc, self._categories,
            expense=expense, date_format=self._date_format,
        )
        self.wait_window(form)
        if form.saved:
            self._notify_refresh("expense")

    def _on_delete(self, expense: Expense):
        dlg = ConfirmDialog(
            self.winfo_toplevel(),
            title="Delete Expense",
            message=f"Delete '{expense.description}' ({format_currency(expense.amount)})?",
        )
        if not dlg.result:
            return
        try:
            self._svc.delete(expense.id)
        except ValueError as e:
            logger.error("Failed to delete expense %s: %s", expense.id, e)
            self._notify_error(f"Could not delete expense: {e}")
        self._notify_refresh("expense")
