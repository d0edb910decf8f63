"""Translation table for the two supported locales."""

# Keys are the English source text as it appears in the API response or the UI.
TRANSLATIONS = {
    "en": {},
    "ar": {
        # Cities
        "Riyadh": "الرياض",
        # Labels
        "Min": "الصغرى",
        "Max": "الكبرى",
        "Loading...": "جار التحميل...",
        "N/A": "غير متوفر",
        # OpenWeather condition descriptions
        "clear sky": "سماء صافية",
        "few clouds": "غيوم قليلة",
        "scattered clouds": "غيوم متفرقة",
        "broken clouds": "غيوم متكسرة",
        "overcast clouds": "غيوم ملبدة",
        "shower rain": "زخات مطر",
        "light rain": "مطر خفيف",
        "moderate rain": "مطر معتدل",
        "heavy intensity rain": "مطر غزير",
        "rain": "مطر",
        "thunderstorm": "عاصفة رعدية",
        "snow": "ثلج",
        "mist": "ضباب خفيف",
        "fog": "ضباب",
        "haze": "غبار خفيف",
        "smoke": "دخان",
        "dust": "غبار",
        "sand": "رمال",
        "widespread dust": "غبار منتشر",
        "sand/dust whirls": "زوابع رملية",
        "squalls": "هبات رياح",
        "tornado": "إعصار",
    },
}


def translate(key: str, locale_code: str) -> str:
    """
    Look up the localized text for key.

    Never raises: unknown locales and untranslated keys return the key itself.
    """
    return TRANSLATIONS.get(locale_code, {}).get(key, key)
