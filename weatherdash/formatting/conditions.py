"""Condition code lookups: icon name, background gradient, icon colour.

Codes follow the OpenWeatherMap grouping: 2xx thunderstorm, 3xx drizzle,
5xx rain, 6xx snow, 7xx atmosphere, 800 clear, 80x clouds.
"""

DAY_CLEAR_GRADIENT = "from-blue-500 to-sky-300"
NIGHT_CLEAR_GRADIENT = "from-slate-800 to-slate-950"


def weather_icon(code: int, is_day: bool = True) -> str:
    if 200 <= code < 300:
        return "cloud-lightning"
    if 300 <= code < 400:
        return "cloud-drizzle"
    if 500 <= code < 600:
        # 511 is freezing rain
        return "cloud-hail" if code == 511 else "cloud-rain"
    if 600 <= code < 700:
        return "snowflake" if code in (601, 602) else "cloud-snow"
    if 700 <= code < 800:
        # 781 is tornado, the rest of the group is fog/haze/dust
        return "wind" if code == 781 else "cloud-fog"
    if code == 800:
        return "sun" if is_day else "moon"
    if 800 < code < 900:
        if code == 801:
            return "cloud-sun" if is_day else "cloud"
        return "cloud"
    return "sun" if is_day else "moon"


def weather_gradient(code: int, is_day: bool = True) -> str:
    if code == 800:
        return DAY_CLEAR_GRADIENT if is_day else NIGHT_CLEAR_GRADIENT
    if code == 801:
        return "from-blue-400 to-blue-300" if is_day else "from-slate-700 to-slate-900"
    if 801 < code <= 804:
        return "from-gray-400 to-gray-300"
    if 300 <= code < 400 or 500 <= code < 600:
        return "from-slate-600 to-slate-700"
    if 600 <= code < 700:
        return "from-slate-300 to-slate-200"
    if 200 <= code < 300:
        return "from-slate-700 to-slate-900"
    return DAY_CLEAR_GRADIENT if is_day else NIGHT_CLEAR_GRADIENT


def icon_color(code: int) -> str:
    if code == 800:
        return "text-yellow-300"
    if 800 < code < 900:
        return "text-gray-400"
    if 300 <= code < 400 or 500 <= code < 600:
        return "text-blue-400"
    if 600 <= code < 700:
        return "text-slate-200"
    if 200 <= code < 300:
        return "text-purple-500"
    return "text-gray-400"
