import customtkinter as ctk

from services.budget_service import BudgetService
from services.category_service import CategoryService
from services.expense_service import ExpenseService
from services.report_service import ReportService
from ui.components.alert_banner import AlertBanner
from ui.tabs.categories_tab import CategoriesTab
from ui.tabs.dashboard_tab import DashboardTab
from ui.tabs.expenses_tab import ExpensesTab
from utils.app_config import get_setting, set_setting
from utils.constants import APP_HEIGHT, APP_NAME, APP_WIDTH


_REFRESH_SCOPES: dict[str, set[str]] = {
    "dashboard": {"dashboard"},
    "expense":  {"dashboard", "expenses", "categories"},
    "category": {"dashboard", "expenses", "categories"},
    "budget":   {"dashboard", "categories"},
    "full":     {"dashboard", "expenses", "categories"},
}


class AppWindow(ctk.CTk):
    def __init__(
        self,
        category_service: CategoryService,
        expense_service: ExpenseService,
        budget_service: BudgetService,
        report_service: ReportService,
        date_format: str = "MM/DD/YYYY",
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._cat_svc = category_service
        self._expense_svc = expense_service
        self._budget_svc = budget_service
        self._report_svc = report_service
        self._date_format = date_format

        self.title(f"{APP_NAME} Dashboard")
        self.minsize(APP_WIDTH, APP_HEIGHT)
        self.geometry(f"{APP_WIDTH}x{APP_HEIGHT}")

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(2, weight=1)

        self._build_header()
        self._build_banner_area()
        self._build_tabs()

    def _build_header(self):
        bar = ctk.CTkFrame(self, fg_color=("gray85", "gray15"), corner_radius=0, height=48)
        bar.grid(row=0, column=0, sticky="ew")
        bar.grid_propagate(False)
        ctk.CTkLabel(
            bar, text=f"🐷  {APP_NAME} Dashboard",
            font=ctk.CTkFont(size=18, weight="bold"),
        ).pack(side="left", padx=16, pady=8)
        ctk.CTkButton(
            bar, text="Refresh", width=90,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=lambda: self.notify_tabs_refresh("full"),
        ).pack(side="right", padx=12)

        appearance = str(get_setting("appearance_mode")).lower()
        self._appearance_var = ctk.StringVar(value=appearance.title())
        ctk.CTkOptionMenu(
            bar, values=["System", "Light", "Dark"],
            variable=self._appearance_var, width=100,
            command=self._on_appearance_change,
        ).pack(side="right", padx=(0, 4))

    def _on_appearance_change(self, choice: str):
        appearance_key = choice.lower()
        set_setting("appearance_mode", appearance_key)
        ctk.set_appearance_mode(appearance_key)
        self.notify_tabs_refresh("dashboard")

    def _build_banner_area(self):
        self._banner_frame = ctk.CTkFrame(self, fg_color="transparent", height=0)
        self._banner_frame.grid(row=1, column=0, sticky="ew", padx=8)

    def _build_tabs(self):
        self._tabview = ctk.CTkTabview(self)
        self._tabview.grid(row=2, column=0, sticky="nsew", padx=8, pady=(0, 8))

        for tab_name in ("Dashboard", "Expenses", "Categories"):
            self._tabview.add(tab_name)
            self._tabview.tab(tab_name).grid_columnconfigure(0, weight=1)
            self._tabview.tab(tab_name).grid_rowconfigure(0, weight=1)

        self._dashboard_tab = DashboardTab(
            self._tabview.tab("Dashboard"),
            report_service=self._report_svc,
            notify_error=self.show_error,
        )
        self._dashboard_tab.grid(row=0, column=0, sticky="nsew")

        self._expenses_tab = ExpensesTab(
            self._tabview.tab("Expenses"),
            expense_service=self._expense_svc,
            category_service=self._cat_svc,
            notify_refresh=self.notify_tabs_refresh,
            notify_error=self.show_error,
            date_format=self._date_format,
        )
        self._expenses_tab.grid(row=0, column=0, sticky="nsew")

        self._categories_tab = CategoriesTab(
            self._tabview.tab("Categories"),
            category_service=self._cat_svc,
            budget_service=self._budget_svc,
            report_service=self._report_svc,
            notify_refresh=self.notify_tabs_refresh,
            notify_error=self.show_error,
        )
        self._categories_tab.grid(row=0, column=0, sticky="nsew")

    # ── Refresh ──────────────────────────────────────────────────────────────
    def notify_tabs_refresh(self, scope: str = "full"):
        tabs = _REFRESH_SCOPES.get(scope, _REFRESH_SCOPES["full"])
        if "dashboard" in tabs:
            self._dashboard_tab.refresh()
        if "expenses" in tabs:
            self._expenses_tab.refresh()
        if "categories" in tabs:
            self._categories_tab.refresh()

    # ── Banners ──────────────────────────────────────────────────────────────
    def show_error(self, message: str):
        self._show_banner(message, "error")

    def _show_banner(self, message: str, severity: str):
        for w in self._banner_frame.winfo_children():
            w.destroy()
        AlertBanner(
            self._banner_frame, message=message, severity=severity,
            auto_dismiss_ms=8000,
        ).pack(fill="x", pady=2)
