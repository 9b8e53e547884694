import logging
from dataclasses import replace

import customtkinter as ctk

from models.category import Category
from models.expense import Expense
from services.expense_service import ExpenseService
from ui.components.confirm_dialog import center_on_master
from ui.components.date_picker import DatePickerWidget
from utils.date_helpers import today_str
from utils.validation import validate_amount

logger = logging.getLogger(__name__)


class ExpenseForm(ctk.CTkToplevel):
    """Add or edit an expense."""

    _last_date: str = today_str()  # reset to today on each app launch

    def __init__(
        self,
        master,
        expense_service: ExpenseService,
        categories: list[Category],
        expense: Expense | None = None,
        date_format: str = "MM/DD/YYYY",
        **kwargs,
    ):
        super().__init__(master, **kwargs)
        self._svc = expense_service
        self._categories = categories
        self._expense = expense
        self.saved = False

        self.title("Edit Expense" if expense else "Add Expense")
        self.resizable(False, False)
        self.grid_columnconfigure(1, weight=1)

        r = 0
        self._label("Description:", r)
        self._desc_var = ctk.StringVar(value=expense.description if expense else "")
        ctk.CTkEntry(
            self, textvariable=self._desc_var, width=220,
            placeholder_text="e.g., Coffee",
        ).grid(row=r, column=1, padx=(0, 16), pady=(16, 4), sticky="ew")
        r += 1

        self._label("Amount ($):", r)
        self._amount_var = ctk.StringVar(value=f"{expense.amount:.2f}" if expense else "")
        ctk.CTkEntry(self, textvariable=self._amount_var, width=220).grid(
            row=r, column=1, padx=(0, 16), pady=4, sticky="ew"
        )
        r += 1

        self._label("Category:", r)
        names = [c.name for c in categories]
        current = next(
            (c.name for c in categories if expense and c.id == expense.category_id), ""
        )
        self._cat_var = ctk.StringVar(value=current)
        ctk.CTkComboBox(
            self, values=names, variable=self._cat_var, width=220, state="readonly",
        ).grid(row=r, column=1, padx=(0, 16), pady=4, sticky="ew")
        r += 1

        self._label("Date:", r)
        self._date_picker = DatePickerWidget(
            self,
            initial_date=expense.date if expense else ExpenseForm._last_date,
            date_format=date_format,
        )
        self._date_picker.grid(row=r, column=1, padx=(0, 16), pady=4, sticky="w")
        r += 1

        self._error_var = ctk.StringVar()
        ctk.CTkLabel(
            self, textvariable=self._error_var,
            text_color="#F44336", wraplength=300, anchor="w",
        ).grid(row=r, column=0, columnspan=2, padx=16, pady=(0, 4), sticky="ew")
        r += 1

        btn_frame = ctk.CTkFrame(self, fg_color="transparent")
        btn_frame.grid(row=r, column=0, columnspan=2, padx=16, pady=(4, 16), sticky="ew")
        ctk.CTkButton(
            btn_frame, text="Cancel", width=90,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=self.destroy,
        ).pack(side="left")
        ctk.CTkButton(
            btn_frame, text="Save Changes" if expense else "Add Expense",
            width=120, command=self._on_save,
        ).pack(side="right")

        self.transient(master)
        self.grab_set()
        center_on_master(self)

    def _label(self, text, row):
        ctk.CTkLabel(self, text=text).grid(
            row=row, column=0, padx=(16, 8), pady=(16 if row == 0 else 4, 4), sticky="e"
        )

    def _on_save(self):
        desc = self._desc_var.get().strip()
        if not desc:
            self._error_var.set("Description is required.")
            return
        try:
            amount = validate_amount(self._amount_var.get())
        except ValueError as e:
            self._error_var.set(str(e))
            return
        cat = next((c for c in self._categories if c.name == self._cat_var.get()), None)
        if not cat:
            self._error_var.set("Category is required.")
            return
        if not self._date_picker.is_valid():
            self._error_var.set("Invalid date.")
            return
        date_str = self._date_picker.get()

        try:
            if self._expense:
                self._svc.update(replace(
                    self._expense, description=desc, amount=amount,
                    category_id=cat.id, date=date_str,
                ))
            else:
                self._svc.create(desc, amount, cat.id, date_str)
        except ValueError as e:
            logger.error("Failed to save expense: %s", e)
            self._error_var.set(str(e))
            return
        ExpenseForm._last_date = date_str
        self.saved = True
        self.destroy()
