from dataclasses import dataclass

CATEGORY_ICONS = (
    "home", "utensils", "car", "shopping-cart", "film", "shirt",
    "heart-pulse", "plane", "book-open", "gift", "tag",
)
DEFAULT_ICON = "tag"


@dataclass
class Category:
    id: str
    name: str
    icon: str = DEFAULT_ICON    # key from CATEGORY_ICONS, resolved by the UI
    color: str = "#cccccc"
