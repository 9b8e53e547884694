import logging
from dataclasses import replace
from tkinter import colorchooser

import customtkinter as ctk

from models.budget import BudgetGoal
from models.category import Category, CATEGORY_ICONS, DEFAULT_ICON
from services.budget_service import BudgetService
from services.category_service import CategoryService
from ui.components.confirm_dialog import center_on_master
from utils.constants import CATEGORY_ICON_GLYPHS, DEFAULT_CATEGORY_COLOR, FALLBACK_ICON_GLYPH
from utils.validation import is_hex_color, validate_color

logger = logging.getLogger(__name__)


def icon_label(key: str) -> str:
    return f"{CATEGORY_ICON_GLYPHS.get(key, FALLBACK_ICON_GLYPH)}  {key}"


class CategoryForm(ctk.CTkToplevel):
    """Add a category, or edit one together with its budget limit."""

    def __init__(
        self,
        master,
        category_service: CategoryService,
        budget_service: BudgetService,
        category: Category | None = None,
        **kwargs,
    ):
        super().__init__(master, **kwargs)
        self._svc = category_service
        self._budget_svc = budget_service
        self._category = category
        self._goal: BudgetGoal | None = (
            budget_service.get_for_category(category.id) if category else None
        )
        self.saved = False

        self.title("Edit Category & Budget" if category else "Add New Category")
        self.resizable(False, False)
        self.grid_columnconfigure(1, weight=1)

        r = 0
        ctk.CTkLabel(self, text="Name:").grid(
            row=r, column=0, padx=(16, 8), pady=(16, 4), sticky="e"
        )
        self._name_var = ctk.StringVar(value=category.name if category else "")
        ctk.CTkEntry(
            self, textvariable=self._name_var, width=220,
            placeholder_text="e.g., Groceries",
        ).grid(row=r, column=1, padx=(0, 16), pady=(16, 4), sticky="ew")
        r += 1

        ctk.CTkLabel(self, text="Icon:").grid(
            row=r, column=0, padx=(16, 8), pady=4, sticky="e"
        )
        self._icon_labels = {icon_label(k): k for k in CATEGORY_ICONS}
        self._icon_var = ctk.StringVar(value=icon_label(category.icon if category else DEFAULT_ICON))
        ctk.CTkComboBox(
            self, values=list(self._icon_labels), variable=self._icon_var,
            width=220, state="readonly",
        ).grid(row=r, column=1, padx=(0, 16), pady=4, sticky="ew")
        r += 1

        ctk.CTkLabel(self, text="Color:").grid(
            row=r, column=0, padx=(16, 8), pady=4, sticky="e"
        )
        color_row = ctk.CTkFrame(self, fg_color="transparent")
        color_row.grid(row=r, column=1, padx=(0, 16), pady=4, sticky="ew")
        self._color_var = ctk.StringVar(value=category.color if category else DEFAULT_CATEGORY_COLOR)
        color_entry = ctk.CTkEntry(color_row, textvariable=self._color_var, width=100)
        color_entry.pack(side="left")
        color_entry.bind("<FocusOut>", self._sync_swatch)
        self._swatch = ctk.CTkLabel(
            color_row, text="", width=32, height=24, corner_radius=4,
            fg_color=self._color_var.get(),
        )
        self._swatch.pack(side="left", padx=(8, 0))
        ctk.CTkButton(
            color_row, text="Pick", width=60,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=self._pick_color,
        ).pack(side="left", padx=(8, 0))
        r += 1

        # Budget limit only when editing: new categories start at 0
        self._limit_var = None
        if category:
            ctk.CTkLabel(self, text="Budget ($):").grid(
                row=r, column=0, padx=(16, 8), pady=4, sticky="e"
            )
            self._limit_var = ctk.StringVar(
                value=f"{self._goal.limit:.2f}" if self._goal else ""
            )
            ctk.CTkEntry(
                self, textvariable=self._limit_var, width=220,
                placeholder_text="0 = no budget",
            ).grid(row=r, column=1, padx=(0, 16), pady=4, sticky="ew")
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
            btn_frame, text="Save Changes" if category else "Add Category",
            width=120, command=self._on_save,
        ).pack(side="right")

        self.transient(master)
        self.grab_set()
        center_on_master(self)

    def _pick_color(self):
        result = colorchooser.askcolor(
            color=self._color_var.get(), parent=self, title="Pick Category Color"
        )
        if result and result[1]:
            self._color_var.set(result[1])
            self._swatch.configure(fg_color=result[1])

    def _sync_swatch(self, _event=None):
        color = self._color_var.get().strip()
        if is_hex_color(color):
            self._swatch.configure(fg_color=color)

    def _on_save(self):
        name = self._name_var.get().strip()
        if not name:
            self._error_var.set("Name is required.")
            return
        icon = self._icon_labels.get(self._icon_var.get(), DEFAULT_ICON)
        try:
            color = validate_color(self._color_var.get() or DEFAULT_CATEGORY_COLOR)
        except ValueError as e:
            self._error_var.set(str(e))
            return

        try:
            if self._category:
                self._svc.update(replace(self._category, name=name, icon=icon, color=color))
                self._budget_svc.set_limit(self._category.id, self._limit_var.get())
            else:
                self._svc.create(name, icon, color)
        except ValueError as e:
            logger.error("Failed to save category: %s", e)
            self._error_var.set(str(e))
            return
        self.saved = True
        self.destroy()
