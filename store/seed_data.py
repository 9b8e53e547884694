"""Demo data loaded into a fresh store (June 2024)."""

DEFAULT_CATEGORIES = [
    {"id": "cat1",  "name": "Housing",           "icon": "home",          "color": "#2196F3"},
    {"id": "cat2",  "name": "Food & Dining",     "icon": "utensils",      "color": "#FF9800"},
    {"id": "cat3",  "name": "Transportation",    "icon": "car",           "color": "#9C27B0"},
    {"id": "cat4",  "name": "Groceries",         "icon": "shopping-cart", "color": "#4CAF50"},
    {"id": "cat5",  "name": "Entertainment",     "icon": "film",          "color": "#EC407A"},
    {"id": "cat6",  "name": "Clothing",          "icon": "shirt",         "color": "#009688"},
    {"id": "cat7",  "name": "Health & Wellness", "icon": "heart-pulse",   "color": "#F44336"},
    {"id": "cat8",  "name": "Travel",            "icon": "plane",         "color": "#FBC02D"},
    {"id": "cat9",  "name": "Education",         "icon": "book-open",     "color": "#7E57C2"},
    {"id": "cat10", "name": "Gifts & Donations", "icon": "gift",          "color": "#808080"},
]

DEFAULT_EXPENSES = [
    {"id": "exp1",  "description": "Rent Payment",     "amount": 1200.0, "category_id": "cat1",  "date": "2024-06-01"},
    {"id": "exp2",  "description": "Electricity Bill", "amount": 75.0,   "category_id": "cat1",  "date": "2024-06-15"},
    {"id": "exp3",  "description": "Dinner Out",       "amount": 60.0,   "category_id": "cat2",  "date": "2024-06-05"},
    {"id": "exp4",  "description": "Lunch Meeting",    "amount": 35.0,   "category_id": "cat2",  "date": "2024-06-12"},
    {"id": "exp5",  "description": "Coffee Shop",      "amount": 15.0,   "category_id": "cat2",  "date": "2024-06-20"},
    {"id": "exp6",  "description": "Gas Fill-up",      "amount": 50.0,   "category_id": "cat3",  "date": "2024-06-08"},
    {"id": "exp7",  "description": "Bus Fare",         "amount": 20.0,   "category_id": "cat3",  "date": "2024-06-18"},
    {"id": "exp8",  "description": "Weekly Groceries", "amount": 150.0,  "category_id": "cat4",  "date": "2024-06-03"},
    {"id": "exp9",  "description": "Snacks",           "amount": 25.0,   "category_id": "cat4",  "date": "2024-06-10"},
    {"id": "exp10", "description": "Bulk Buy",         "amount": 200.0,  "category_id": "cat4",  "date": "2024-06-25"},
    {"id": "exp11", "description": "Movie Tickets",    "amount": 30.0,   "category_id": "cat5",  "date": "2024-06-07"},
    {"id": "exp12", "description": "Concert",          "amount": 100.0,  "category_id": "cat5",  "date": "2024-06-22"},
    {"id": "exp13", "description": "New Shirt",        "amount": 45.0,   "category_id": "cat6",  "date": "2024-06-14"},
    {"id": "exp14", "description": "Gym Membership",   "amount": 40.0,   "category_id": "cat7",  "date": "2024-06-01"},
    {"id": "exp15", "description": "Pharmacy",         "amount": 20.0,   "category_id": "cat7",  "date": "2024-06-19"},
    {"id": "exp16", "description": "Flight Booking",   "amount": 350.0,  "category_id": "cat8",  "date": "2024-06-11"},
    {"id": "exp17", "description": "Online Course",    "amount": 99.0,   "category_id": "cat9",  "date": "2024-06-06"},
    {"id": "exp18", "description": "Birthday Gift",    "amount": 50.0,   "category_id": "cat10", "date": "2024-06-28"},
]

# Travel, Education and Gifts start without a goal; reads backfill them.
DEFAULT_BUDGET_GOALS = [
    {"id": "goal1", "category_id": "cat1", "limit": 1300.0},
    {"id": "goal2", "category_id": "cat2", "limit": 300.0},
    {"id": "goal3", "category_id": "cat3", "limit": 150.0},
    {"id": "goal4", "category_id": "cat4", "limit": 400.0},
    {"id": "goal5", "category_id": "cat5", "limit": 150.0},
    {"id": "goal6", "category_id": "cat6", "limit": 100.0},
    {"id": "goal7", "category_id": "cat7", "limit": 100.0},
]
DEFAULT_GOAL_PERIOD = ("2024-06-01", "2024-06-30")
