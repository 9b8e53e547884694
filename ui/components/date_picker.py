import tkinter as tk
from datetime import date
from tkinter import ttk

import customtkinter as ctk
from tkcalendar import Calendar

from utils.date_helpers import format_date, format_display_date, parse_display_date


class DatePickerWidget(ctk.CTkFrame):
    """Entry in the display format plus a calendar popup button.

    .get() returns YYYY-MM-DD (or the raw text when it can't be parsed).
    .set(date_str) takes YYYY-MM-DD.
    """

    def __init__(
        self,
        master,
        initial_date: str | None = None,
        date_format: str = "MM/DD/YYYY",
        **kwargs,
    ):
        super().__init__(master, fg_color="transparent", **kwargs)
        self.grid_columnconfigure(0, weight=1)
        self._date_format = date_format
        self._popup: ctk.CTkToplevel | None = None

        self._var = tk.StringVar(
            value=format_display_date(initial_date, date_format) if initial_date else ""
        )
        self._entry = ctk.CTkEntry(self, textvariable=self._var, width=130)
        self._entry.grid(row=0, column=0, sticky="ew")
        self._entry.bind("<FocusOut>", self._normalize)
        self._entry.bind("<Return>", self._normalize)

        ctk.CTkButton(self, text="📅", width=32, command=self._toggle_popup).grid(
            row=0, column=1, padx=(4, 0)
        )

    def _parsed(self) -> date | None:
        return parse_display_date(self._var.get(), self._date_format)

    def get(self) -> str:
        d = self._parsed()
        return format_date(d) if d else self._var.get().strip()

    def set(self, date_str: str):
        self._var.set(format_display_date(date_str, self._date_format) if date_str else "")
        self._mark_valid(True)

    def is_valid(self) -> bool:
        return self._parsed() is not None

    def _normalize(self, _event=None):
        if not self._var.get().strip():
            self._mark_valid(True)
            return
        d = self._parsed()
        if d:
            self._var.set(format_display_date(format_date(d), self._date_format))
        self._mark_valid(d is not None)

    def _mark_valid(self, valid: bool):
        self._entry.configure(border_color=("gray65", "gray35") if valid else "#F44336")

    def _toggle_popup(self):
        if self._popup and self._popup.winfo_exists():
            self._close_popup()
            return

        popup = ctk.CTkToplevel(self)
        popup.overrideredirect(True)
        popup.resizable(False, False)
        self._popup = popup

        dark = ctk.get_appearance_mode() == "Dark"
        bg, fg = ("#2b2b2b", "#ffffff") if dark else ("#ffffff", "#000000")
        style = ttk.Style(popup)
        style.theme_use("default")
        style.configure("Calendar.Treeview", background=bg, foreground=fg, fieldbackground=bg)

        current = self._parsed() or date.today()
        cal = Calendar(
            popup,
            selectmode="day",
            year=current.year,
            month=current.month,
            day=current.day,
            date_pattern="yyyy-mm-dd",
            background=bg,
            foreground=fg,
            headersbackground=bg,
            headersforeground=fg,
            selectbackground="#1f6aa5",
            weekendbackground=bg,
            weekendforeground=fg,
            othermonthforeground="gray60",
            bordercolor=bg,
        )
        cal.pack(padx=4, pady=4)
        cal.bind("<<CalendarSelected>>", lambda _e: self._on_selected(cal.get_date()))

        self._entry.update_idletasks()
        x = self._entry.winfo_rootx()
        y = self._entry.winfo_rooty() + self._entry.winfo_height() + 2
        popup.geometry(f"+{x}+{y}")
        popup.bind("<FocusOut>", lambda _e: self._maybe_close())

    def _on_selected(self, iso: str):
        self.set(iso)
        self._close_popup()

    def _maybe_close(self):
        if self._popup is None or not self._popup.winfo_exists():
            return
        focused = self._popup.focus_get()
        if focused is None or not str(focused).startswith(str(self._popup)):
            self._close_popup()

    def _close_popup(self):
        if self._popup is not None and self._popup.winfo_exists():
            self._popup.destroy()
        self._popup = None
