"""Lifestyle Formulas - gadgets, birthdays, and the self-assessment quizzes.

Invariants:
    - Every function is PURE: (validated input, ReferenceTables) -> CalculationResult
    - Quiz scores are capped at 100; levels come from fixed score bands
    - Every result carries 3-5 suggestions

Design Decisions:
    - Quiz formulas (laziness, gaming, aging) return the same CalculationResult as the
      calculators, so the normalizer never special-cases them
    - phone_lifespan subtracts the phone's age for every brand, including known ones
"""

from lifeformula.core.calc_result import CalculationResult, round_half_up, thousands
from lifeformula.core.reference_tables import ReferenceTables


# --- phone-lifespan ---------------------------------------------------------

def _usage_profile(daily_hours: float) -> tuple[float, str]:
    if daily_hours > 8:
        return 0.7, "重度使用"
    if daily_hours > 4:
        return 0.85, "中度使用"
    return 1.0, "輕度使用"


def phone_lifespan(data: dict, tables: ReferenceTables) -> CalculationResult:
    """Days left before the phone gives up, by brand lifespan and daily usage."""
    brand = data["phone_brand"]
    age_months = data["phone_age_months"]
    daily_hours = data["daily_usage_hours"]

    lifespan = tables.phone_brand_lifespan_months.get(
        brand, tables.phone_brand_lifespan_months[tables.phone_brand_default],
    )
    base_days_left = (lifespan - age_months) * 30
    usage_multiplier, usage_level = _usage_profile(daily_hours)
    days_left = max(0, round_half_up(base_days_left * usage_multiplier))

    if days_left > 365:
        years = round_half_up(days_left / 365, 1)
        description = f"你的 {brand} 還能撐 {years} 年，保養得不錯！"
    elif days_left > 30:
        description = f"你的手機預計還能用 {round_half_up(days_left / 30)} 個月，開始考慮換機吧！"
    else:
        description = "警告！你的手機隨時可能罷工，建議立即更換！"

    return CalculationResult(
        value=days_left,
        unit="天",
        description=description,
        details={
            "current_age": age_months,
            "daily_usage": daily_hours,
            "brand": brand,
            "expected_lifespan_months": lifespan,
            "usage_level": usage_level,
        },
        suggestions=[
            "定期清理手機儲存空間",
            "避免邊充電邊玩手機",
            "使用手機殼和螢幕保護貼",
        ],
    )


# --- birthday-collision -----------------------------------------------------

def birthday_collision(data: dict, tables: ReferenceTables) -> CalculationResult:
    """How many people in Taiwan share your birthday."""
    month = int(data["birth_month"])
    day = int(data["birth_day"])
    population = tables.taiwan_population

    same_birthday = round_half_up(population / tables.days_in_year)
    multiplier = tables.special_birthdays.get(f"{month}-{day}", 1.0)
    adjusted = round_half_up(same_birthday * multiplier)

    if multiplier > 1.1:
        description = f"哇！你的生日是特殊日期，全台灣有約 {thousands(adjusted)} 人跟你同天生日，超熱鬧！"
    else:
        description = f"全台灣約有 {thousands(adjusted)} 人跟你在同一天慶生，你們是生日夥伴！"

    return CalculationResult(
        value=adjusted,
        unit="人",
        description=description,
        details={
            "birth_date": f"{month}/{day}",
            "probability": round_half_up(adjusted / population * 10000) / 100,
            "is_special_date": multiplier > 1.0,
            "taiwan_population": population,
        },
        suggestions=[
            "可以在社群媒體上找找同生日的人",
            "特殊日期生日記得提早訂餐廳",
            "同生日的人可以組成生日俱樂部",
        ],
    )


# --- lazy-index-test --------------------------------------------------------

_EXERCISE_TEXTS = {
    "daily": "每天運動，完全不懶！",
    "often": "經常運動，還不錯",
    "sometimes": "偶爾運動，有點懶了",
    "rarely": "很少運動，懶人傾向明顯",
    "never": "從不運動，超級懶人！",
}
_COOKING_TEXTS = {
    "daily": "每天下廚，勤勞的表現",
    "often": "經常下廚，還算勤快",
    "sometimes": "偶爾下廚，偏懶",
    "rarely": "幾乎不煮飯，懶人行為",
    "never": "從不下廚，徹底的懶人",
}
_CLEANING_TEXTS = {
    "daily": "每天打掃，超級勤勞",
    "often": "經常打掃，維持整潔",
    "sometimes": "偶爾打掃，有點懶散",
    "rarely": "很少打掃，懶惰傾向",
    "never": "從不打掃，極度懶惰",
}

# (score ceiling, level, description, advice)
_LAZINESS_BANDS = [
    (20, "勤勞蜜蜂", "你是一個非常勤勞的人！", "保持這樣的好習慣，你已經是生活的模範了！"),
    (40, "普通人類", "你的懶人指數在正常範圍內", "適度的懶惰是人之常情，但可以再稍微勤快一點"),
    (60, "輕度懶人", "你已經有明顯的懶人傾向了", "是時候改變一些生活習慣了，從小事做起！"),
    (80, "中度懶人", "你的懶惰程度已經影響到生活品質", "需要認真考慮改變生活方式，建立更好的習慣"),
]
_LAZINESS_TOP = ("重度懶人", "你已經是懶人界的天花板了！", "緊急狀況！需要立即採取行動改變生活習慣！")


def _sleep_points(hours: float) -> tuple[int, str]:
    if hours <= 6:
        return 5, "睡眠不足可能讓你更想偷懶"
    if hours <= 8:
        return 10, "睡眠時間適中"
    if hours <= 10:
        return 20, "睡眠時間較長，有懶人傾向"
    return 25, "睡眠時間過長，明顯的懶人特徵"


def laziness_index(data: dict, tables: ReferenceTables) -> CalculationResult:
    """0-100 laziness score from sleep, chores, exercise and procrastination."""
    sleep_hours = data["sleep_hours"]
    exercise = data["exercise_frequency"]
    cooking = data["cooking_frequency"]
    cleaning = data["cleaning_frequency"]
    procrastination = data["procrastination_level"]

    score, sleep_text = _sleep_points(sleep_hours)
    score += tables.laziness_exercise_points.get(exercise, 0)
    score += tables.laziness_cooking_points.get(cooking, 0)
    score += tables.laziness_cleaning_points.get(cleaning, 0)
    bonus = min(procrastination * 2, 20)
    score += bonus

    factors = [
        sleep_text,
        _EXERCISE_TEXTS.get(exercise, ""),
        _COOKING_TEXTS.get(cooking, ""),
        _CLEANING_TEXTS.get(cleaning, ""),
        f"拖延症程度: {procrastination}/10，額外增加 {bonus} 分",
    ]
    final_score = round_half_up(min(score, 100))

    level, description, advice = _LAZINESS_TOP
    for ceiling, *outcome in _LAZINESS_BANDS:
        if final_score <= ceiling:
            level, description, advice = outcome
            break

    return CalculationResult(
        value=final_score,
        unit="分",
        level=level,
        description=description,
        details={
            "score": final_score,
            "advice": advice,
            "factors": factors,
            "breakdown": {
                "sleep": "正常" if sleep_hours <= 8 else "偏長",
                "exercise": exercise,
                "cooking": cooking,
                "cleaning": cleaning,
                "procrastination": f"{procrastination}/10",
            },
        },
        suggestions=[advice, *factors[:3]],
    )


# --- gaming-addiction-calculator --------------------------------------------

_GAMING_BANDS = [
    (20, "健康玩家", "你的遊戲習慣很健康！", "繼續保持良好的遊戲習慣，記得適度休息"),
    (40, "輕度風險", "需要稍加注意遊戲時間和花費", "建議設定遊戲時間限制，控制消費"),
    (60, "中度風險", "遊戲已開始影響你的生活", "需要認真考慮減少遊戲時間，尋求平衡"),
    (80, "高度風險", "遊戲嚴重影響你的日常生活", "強烈建議尋求專業協助，制定戒遊計畫"),
]
_GAMING_TOP = ("極度風險", "遊戲成癮症狀明顯，需要立即行動", "緊急！請立即尋求專業醫療協助")


def _gaming_hours_points(hours: float) -> tuple[int, str]:
    if hours <= 2:
        return 5, "遊戲時間適中，很健康"
    if hours <= 4:
        return 15, "遊戲時間稍長，需要注意"
    if hours <= 6:
        return 25, "遊戲時間過長，有風險"
    return 30, "遊戲時間嚴重超標，高風險"


def _gaming_spending_points(weekly: float) -> tuple[int, str]:
    if weekly <= 100:
        return 0, "遊戲花費合理"
    if weekly <= 500:
        return 10, "遊戲花費偏高"
    if weekly <= 1000:
        return 20, "遊戲花費很高，需要控制"
    return 25, "遊戲花費極高，嚴重超支"


def _impact_factor(rating: float, subject: str) -> str | None:
    if rating >= 8:
        return f"嚴重影響{subject}"
    if rating >= 5:
        return f"明顯影響{subject}"
    if rating >= 3:
        return f"輕微影響{subject}"
    return None


def gaming_addiction(data: dict, tables: ReferenceTables) -> CalculationResult:
    """0-100 gaming risk score from time, money and the damage it does."""
    daily_hours = data["daily_hours"]
    weekly_spending = data["weekly_spending"]
    impacts = {
        "social": (data["social_impact"], "社交關係"),
        "work": (data["work_impact"], "工作/學習"),
        "sleep": (data["sleep_impact"], "睡眠品質"),
    }

    hours_points, hours_text = _gaming_hours_points(daily_hours)
    spending_points, spending_text = _gaming_spending_points(weekly_spending)
    score = hours_points + spending_points
    risk_factors = [hours_text, spending_text]
    for rating, subject in impacts.values():
        score += rating * 1.5
        factor = _impact_factor(rating, subject)
        if factor:
            risk_factors.append(factor)

    final_score = round_half_up(min(score, 100))
    level, description, recommendation = _GAMING_TOP
    for ceiling, *outcome in _GAMING_BANDS:
        if final_score <= ceiling:
            level, description, recommendation = outcome
            break

    return CalculationResult(
        value=final_score,
        unit="分",
        level=level,
        description=description,
        details={
            "risk_factors": risk_factors,
            "daily_hours": daily_hours,
            "weekly_spending": weekly_spending,
            "yearly_spending": weekly_spending * 52,
            "impact_rating": {
                key: f"{rating}/10" for key, (rating, _) in impacts.items()
            },
        },
        suggestions=[recommendation, *risk_factors[:3]],
    )


# --- aging-simulator --------------------------------------------------------

_AGING_BANDS = [
    (-3, "非常健康", "你的生活習慣很棒！繼續保持這種健康的生活方式"),
    (0, "健康", "整體健康狀況良好，可以考慮在某些方面再改善一下"),
    (3, "一般", "需要開始關注健康，改善一些不良的生活習慣"),
    (6, "需要注意", "健康狀況不太理想，建議積極改變生活方式"),
]
_AGING_TOP = ("警告", "健康狀況令人擔憂，強烈建議立即改善生活習慣並諮詢醫生")


def _habit_effects(data: dict) -> list[tuple[int, int, str]]:
    """(biological age delta, life expectancy delta, explanation) per habit."""
    effects = []

    smoking = data["smoking"]
    if smoking == "heavy":
        effects.append((8, -10, "重度吸菸：生理年齡+8歲，預期壽命-10年"))
    elif smoking == "light":
        effects.append((3, -5, "輕度吸菸：生理年齡+3歲，預期壽命-5年"))
    else:
        effects.append((0, 0, "不吸菸：很好的選擇！"))

    drinking = data["drinking"]
    if drinking == "heavy":
        effects.append((5, -7, "重度飲酒：生理年齡+5歲，預期壽命-7年"))
    elif drinking == "moderate":
        effects.append((1, -2, "適度飲酒：生理年齡+1歲，預期壽命-2年"))
    else:
        effects.append((0, 2, "不飲酒：預期壽命+2年"))

    exercise = data["exercise"]
    if exercise == "regular":
        effects.append((-5, 8, "規律運動：生理年齡-5歲，預期壽命+8年"))
    elif exercise == "occasional":
        effects.append((-2, 3, "偶爾運動：生理年齡-2歲，預期壽命+3年"))
    else:
        effects.append((3, -5, "不運動：生理年齡+3歲，預期壽命-5年"))

    diet = data["diet"]
    if diet == "healthy":
        effects.append((-3, 5, "健康飲食：生理年齡-3歲，預期壽命+5年"))
    elif diet == "average":
        effects.append((0, 0, "普通飲食：無特殊影響"))
    else:
        effects.append((4, -6, "不健康飲食：生理年齡+4歲，預期壽命-6年"))

    stress = data["stress"]
    if stress >= 8:
        effects.append((6, -8, "高壓力：生理年齡+6歲，預期壽命-8年"))
    elif stress >= 5:
        effects.append((3, -4, "中等壓力：生理年齡+3歲，預期壽命-4年"))
    else:
        effects.append((-1, 2, "低壓力：生理年齡-1歲，預期壽命+2年"))

    sleep = data["sleep"]
    if 7 <= sleep <= 8:
        effects.append((-2, 3, "充足睡眠：生理年齡-2歲，預期壽命+3年"))
    elif sleep < 6 or sleep > 9:
        effects.append((3, -4, "睡眠不當：生理年齡+3歲，預期壽命-4年"))
    else:
        effects.append((0, 0, "睡眠一般：輕微影響"))

    return effects


def _aging_improvements(data: dict) -> list[str]:
    improvements = []
    if data["smoking"] != "never" or data["drinking"] != "never":
        improvements.append("戒菸戒酒")
    if data["exercise"] != "regular":
        improvements.append("規律運動")
    if data["diet"] != "healthy":
        improvements.append("健康飲食")
    if not 7 <= data["sleep"] <= 8:
        improvements.append("充足睡眠")
    if data["stress"] >= 5:
        improvements.append("減少壓力")
    return improvements


def aging_simulation(data: dict, tables: ReferenceTables) -> CalculationResult:
    """Biological age and life expectancy from six lifestyle habits."""
    age = data["age"]
    effects = _habit_effects(data)

    biological_age = age + sum(delta for delta, _, _ in effects)
    life_expectancy = tables.baseline_life_expectancy + sum(
        delta for _, delta, _ in effects
    )
    biological_age = min(max(biological_age, age - 10), age + 20)
    life_expectancy = min(max(life_expectancy, 60), 100)
    age_difference = biological_age - age
    remaining_years = max(life_expectancy - age, 0)

    status, advice = _AGING_TOP
    for ceiling, *outcome in _AGING_BANDS:
        if age_difference <= ceiling:
            status, advice = outcome
            break

    shown_age = round_half_up(biological_age)
    suggestions = [advice, *_aging_improvements(data), "定期健檢"][:5]
    if len(suggestions) < 3:
        suggestions.append("保持目前的好習慣")

    return CalculationResult(
        value=shown_age,
        unit="歲",
        level=status,
        description=(
            f"你的生理年齡約 {shown_age} 歲（實際 {age} 歲），"
            f"預期壽命 {round_half_up(life_expectancy)} 歲。{advice}"
        ),
        details={
            "actual_age": age,
            "biological_age": shown_age,
            "age_difference": round_half_up(age_difference),
            "life_expectancy": round_half_up(life_expectancy),
            "remaining_years": round_half_up(remaining_years),
            "factors": [text for _, _, text in effects],
        },
        suggestions=suggestions,
    )
