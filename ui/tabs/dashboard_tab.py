import logging
import threading
import tkinter as tk

import customtkinter as ctk
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from matplotlib.figure import Figure

from models.spending import ChartSegment, SpendingByCategory, SpendingSummary
from services.report_service import ReportService
from utils.constants import BUDGET_ALERT_THRESHOLD, PROGRESS_COLORS
from utils.currency import format_budget_status, format_currency

logger = logging.getLogger(__name__)


def progress_color(row: SpendingByCategory) -> str:
    if row.is_over_budget:
        return PROGRESS_COLORS["over"]
    if row.progress_percentage >= BUDGET_ALERT_THRESHOLD * 100:
        return PROGRESS_COLORS["alert"]
    return PROGRESS_COLORS["ok"]


class DashboardTab(ctk.CTkFrame):
    def __init__(self, master, report_service: ReportService, notify_error, **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._report_svc = report_service
        self._notify_error = notify_error
        self._load_gen = 0

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._build_summary_cards()
        self._build_bottom_section()
        self._load()

    def refresh(self):
        self._load()

    def _build_summary_cards(self):
        self._card_frame = ctk.CTkFrame(self, fg_color="transparent")
        self._card_frame.grid(row=0, column=0, sticky="ew", padx=16, pady=12)
        self._card_frame.grid_columnconfigure((0, 1, 2), weight=1)

    def _build_bottom_section(self):
        bottom = ctk.CTkFrame(self, fg_color="transparent")
        bottom.grid(row=1, column=0, sticky="nsew", padx=16, pady=(0, 12))
        bottom.grid_columnconfigure(0, weight=2)
        bottom.grid_columnconfigure(1, weight=3)
        bottom.grid_rowconfigure(0, weight=1)

        self._budget_frame = ctk.CTkScrollableFrame(
            bottom, label_text="Budget Goals Progress", height=300
        )
        self._budget_frame.grid(row=0, column=0, sticky="nsew", padx=(0, 8))

        pie_outer = ctk.CTkFrame(bottom, fg_color=("gray90", "gray20"), corner_radius=8)
        pie_outer.grid(row=0, column=1, sticky="nsew", padx=(8, 0))
        ctk.CTkLabel(
            pie_outer, text="Spending Overview",
            font=ctk.CTkFont(size=13, weight="bold"),
        ).pack(pady=(10, 0))
        ctk.CTkLabel(
            pie_outer, text="Spending distribution across categories.",
            text_color="gray60", font=ctk.CTkFont(size=11),
        ).pack()
        self._pie_fig = Figure(figsize=(4, 3.2), dpi=80, tight_layout=True)
        self._pie_ax = self._pie_fig.add_subplot(111)
        self._pie_mpl = FigureCanvasTkAgg(self._pie_fig, master=pie_outer)
        self._pie_mpl.get_tk_widget().pack(fill="both", expand=True, padx=8, pady=(4, 4))
        self._legend_frame = ctk.CTkFrame(pie_outer, fg_color="transparent")
        self._legend_frame.pack(fill="x", padx=12, pady=(0, 10))

    # ── Data loading ─────────────────────────────────────────────────────────

    def _load(self):
        self._load_gen += 1
        gen = self._load_gen
        self._show_loading()

        def fetch():
            try:
                spending = self._report_svc.get_spending_by_category()
                data = (
                    self._report_svc.get_summary(spending),
                    self._report_svc.get_budget_progress(spending),
                    self._report_svc.get_chart_segments(spending),
                )
                error = None
            except Exception as e:
                logger.exception("Failed to load dashboard data")
                data, error = None, e
            self.after(0, lambda: self._on_data_ready(gen, data, error))

        threading.Thread(target=fetch, daemon=True).start()

    def _on_data_ready(self, gen: int, data, error):
        if gen != self._load_gen:
            return  # superseded by a newer load
        if not self.winfo_exists():
            return
        if error is not None:
            self._show_error(f"Failed to load dashboard data: {error}")
            return
        summary, progress, segments = data
        try:
            self._render_cards(summary)
            self._render_progress(progress)
            self._render_legend(segments)
            self._draw_pie_chart(segments)
        except (ValueError, tk.TclError) as e:
            logger.exception("Failed to render dashboard")
            self._show_error(f"Failed to display dashboard data: {e}")

    def _show_error(self, message: str):
        self._clear(self._card_frame, self._budget_frame, self._legend_frame)
        self._pie_ax.clear()
        self._pie_ax.set_axis_off()
        self._pie_mpl.draw_idle()
        ctk.CTkLabel(
            self._budget_frame,
            text="Failed to load dashboard data. Please try again later.",
            text_color=PROGRESS_COLORS["over"],
        ).pack(pady=20)
        self._notify_error(message)

    def _show_loading(self):
        self._clear(self._budget_frame)
        ctk.CTkLabel(self._budget_frame, text="Loading…", text_color="gray60").pack(pady=20)

    @staticmethod
    def _clear(*frames):
        for frame in frames:
            for w in frame.winfo_children():
                w.destroy()

    # ── Rendering ────────────────────────────────────────────────────────────

    def _render_cards(self, summary: SpendingSummary):
        self._clear(self._card_frame)
        remaining_color = "#2196F3" if summary.remaining >= 0 else PROGRESS_COLORS["over"]
        for i, (label, value, color) in enumerate([
            ("Total Spent", summary.total_spending, PROGRESS_COLORS["over"]),
            ("Total Budget", summary.total_budget, PROGRESS_COLORS["ok"]),
            ("Remaining", summary.remaining, remaining_color),
        ]):
            card = ctk.CTkFrame(self._card_frame, fg_color=("gray90", "gray20"), corner_radius=10)
            card.grid(row=0, column=i, padx=6, sticky="ew")
            card.grid_columnconfigure(0, weight=1)
            ctk.CTkLabel(
                card, text=label, font=ctk.CTkFont(size=12), text_color="gray60",
            ).grid(row=0, column=0, pady=(12, 0), padx=16)
            ctk.CTkLabel(
                card, text=format_currency(value),
                font=ctk.CTkFont(size=20, weight="bold"), text_color=color,
            ).grid(row=1, column=0, pady=(4, 12), padx=16)
        if summary.over_budget_count:
            ctk.CTkLabel(
                self._card_frame,
                text=f"{summary.over_budget_count} categor{'ies' if summary.over_budget_count != 1 else 'y'} over budget",
                text_color=PROGRESS_COLORS["over"],
            ).grid(row=1, column=0, columnspan=3, pady=(6, 0))

    def _render_progress(self, rows: list[SpendingByCategory]):
        self._clear(self._budget_frame)
        if not rows:
            ctk.CTkLabel(
                self._budget_frame,
                text="No budget goals set with limits yet.\n"
                     "Set budget limits for categories to track your progress.",
                text_color="gray60",
            ).pack(pady=20)
            return
        for row in rows:
            f = ctk.CTkFrame(self._budget_frame, fg_color="transparent")
            f.pack(fill="x", pady=4, padx=4)
            top = ctk.CTkFrame(f, fg_color="transparent")
            top.pack(fill="x")
            ctk.CTkLabel(top, text=row.name, anchor="w").pack(side="left")
            ctk.CTkLabel(
                top, text=format_budget_status(row.remaining_amount),
                anchor="e",
                text_color=PROGRESS_COLORS["over"] if row.is_over_budget else "gray60",
            ).pack(side="right")
            bar = ctk.CTkProgressBar(f, progress_color=progress_color(row))
            bar.pack(fill="x", pady=2)
            bar.set(row.progress_percentage / 100)
            bottom = ctk.CTkFrame(f, fg_color="transparent")
            bottom.pack(fill="x")
            ctk.CTkLabel(
                bottom, text=f"{format_currency(row.total_spending)} spent",
                text_color="gray60", font=ctk.CTkFont(size=11),
            ).pack(side="left")
            ctk.CTkLabel(
                bottom, text=f"of {format_currency(row.budget_limit)}",
                text_color="gray60", font=ctk.CTkFont(size=11),
            ).pack(side="right")

    def _render_legend(self, segments: list[ChartSegment]):
        self._clear(self._legend_frame)
        for seg in segments:
            row = ctk.CTkFrame(self._legend_frame, fg_color="transparent")
            row.pack(fill="x", pady=1)
            tk.Label(row, bg=seg.color, width=2).pack(side="left", padx=(0, 4))
            ctk.CTkLabel(
                row, text=f"{seg.name}: {format_currency(seg.value)} ({seg.percent:.0f}%)",
                anchor="w", font=ctk.CTkFont(size=11),
            ).pack(side="left")

    def _style_ax(self, ax, fig):
        is_dark = ctk.get_appearance_mode() == "Dark"
        bg = "#2b2b2b" if is_dark else "#e4e4e4"
        fig.patch.set_facecolor(bg)
        ax.set_facecolor(bg)

    def _draw_pie_chart(self, segments: list[ChartSegment]):
        ax = self._pie_ax
        ax.clear()
        self._style_ax(ax, self._pie_fig)

        if not segments:
            ax.text(0.5, 0.5, "No spending data to display.", ha="center", va="center",
                    transform=ax.transAxes, color="gray")
            ax.set_axis_off()
            self._pie_mpl.draw_idle()
            return

        ax.pie(
            [s.value for s in segments],
            colors=[s.color for s in segments],
            labels=[f"{s.percent:.0f}%" if s.show_label else "" for s in segments],
            labeldistance=0.78,
            textprops={"color": "white", "fontsize": 9, "fontweight": "bold"},
            wedgeprops={"width": 0.45, "edgecolor": "white", "linewidth": 2},
            startangle=90,
        )
        total = sum(s.value for s in segments)
        ax.text(0, 0, format_currency(total), ha="center", va="center",
                fontsize=11, fontweight="bold", color="gray")
        ax.set_aspect("equal")
        self._pie_mpl.draw_idle()
