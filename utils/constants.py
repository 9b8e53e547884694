APP_NAME = "BudgetEasy"
APP_WIDTH = 1200
APP_HEIGHT = 760
DATE_FORMAT = "%Y-%m-%d"
MONTH_FORMAT = "%Y-%m"

# Simulated latency of the mock data layer, in milliseconds
READ_LATENCY_MS = 50
SPENDING_LATENCY_MS = 100
WRITE_LATENCY_MS = 100

BUDGET_ALERT_THRESHOLD = 0.80  # progress bar turns orange at 80%
PIE_LABEL_MIN_PERCENT = 5.0
DEFAULT_CATEGORY_COLOR = "#cccccc"

CATEGORY_ICON_GLYPHS = {
    "home":          "🏠",
    "utensils":      "🍴",
    "car":           "🚗",
    "shopping-cart": "🛒",
    "film":          "🎬",
    "shirt":         "👕",
    "heart-pulse":   "❤",
    "plane":         "✈",
    "book-open":     "📖",
    "gift":          "🎁",
    "tag":           "🏷",
}
FALLBACK_ICON_GLYPH = "•"

SEVERITY_COLORS = {
    "error":   "#F44336",
    "warning": "#FF9800",
    "info":    "#2196F3",
    "success": "#4CAF50",
}

PROGRESS_COLORS = {
    "ok":    "#4CAF50",
    "alert": "#FF9800",
    "over":  "#F44336",
}
