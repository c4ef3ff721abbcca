"""Localized user-facing strings."""

MESSAGES: dict[str, dict[str, str]] = {
    "ar": {
        "no_recipes": "لم يتم العثور على وصفات.",
        "search_error": "حدث خطأ أثناء البحث.",
        "vegetarian_title": "الوصفات النباتية",
        "vegetarian_empty": "لم يتم العثور على وصفات نباتية.",
        "vegetarian_error": "حدث خطأ أثناء البحث عن وصفات نباتية.",
        "dessert_title": "الحلويات",
        "dessert_empty": "لم يتم العثور على حلويات.",
        "dessert_error": "حدث خطأ أثناء البحث عن حلويات.",
        "random_title": "إليك بعض الوصفات المقترحة:",
        "local_title": "إليك بعض الوصفات المحلية:",
        "random_error": "حدث خطأ أثناء جلب الوصفات العشوائية.",
        "ingredients_unit": "مكونات",
        "minutes_unit": "دقيقة",
        "details_button": "عرض التفاصيل",
        "no_instructions": "تعليمات الطبخ غير متوفرة.",
    },
    "en": {
        "no_recipes": "No recipes found.",
        "search_error": "Something went wrong while searching.",
        "vegetarian_title": "Vegetarian recipes",
        "vegetarian_empty": "No vegetarian recipes found.",
        "vegetarian_error": "Something went wrong while searching vegetarian recipes.",
        "dessert_title": "Desserts",
        "dessert_empty": "No desserts found.",
        "dessert_error": "Something went wrong while searching desserts.",
        "random_title": "Here are some suggested recipes:",
        "local_title": "Here are some local recipes:",
        "random_error": "Something went wrong while fetching random recipes.",
        "ingredients_unit": "ingredients",
        "minutes_unit": "min",
        "details_button": "View details",
        "no_instructions": "Cooking instructions are not available.",
    },
}

DEFAULT_LOCALE = "ar"


def message(key: str, locale: str = DEFAULT_LOCALE) -> str:
    """Look up a message, falling back to the default locale."""
    table = MESSAGES.get(locale) or MESSAGES[DEFAULT_LOCALE]
    return table.get(key) or MESSAGES[DEFAULT_LOCALE][key]
