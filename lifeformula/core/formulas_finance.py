"""Finance Formulas - money-flavoured calculators (salary, rent, food, transport, breakups).

Invariants:
    - Every function is PURE: (validated input, ReferenceTables) -> CalculationResult
    - Threshold bands and text are business constants, reproduced exactly
    - A zero caller-controlled denominator returns undefined_result(), never NaN/Infinity
      (noodle-survival also when the ratio overflows to Infinity)
    - Every result carries 3-5 suggestions

Design Decisions:
    - One function per tool, no shared base class: formulas differ more than they agree
    - Input is already coerced to numbers by the executor; optional fields use .get()
"""

import math

from lifeformula.core.calc_result import (
    CalculationResult,
    pick_band,
    round_half_up,
    thousands,
    undefined_result,
)
from lifeformula.core.reference_tables import ReferenceTables


# --- moonlight-calculator ---------------------------------------------------

_MOONLIGHT_BANDS = [
    (95, ("超級月光族", "恭喜！你已經達到月光族的最高境界，每個月都是財務極限挑戰！")),
    (80, ("專業月光族", "你是月光族中的佼佼者，花錢技術已臻化境！")),
    (60, ("業餘月光族", "偶爾月光，但還有改善空間，繼續努力！")),
]
_MOONLIGHT_DEFAULT = ("理財新手", "看起來你對金錢還有一定控制力，值得學習！")

_MOONLIGHT_SUGGESTIONS = [
    (80, [
        "考慮建立緊急預備金，至少存3個月生活費",
        "使用記帳APP追蹤每日支出",
        "尋找副業或兼職增加收入來源",
    ]),
    (60, [
        "設定每月固定儲蓄目標",
        "減少非必要的娛樂支出",
        "開始記帳，找出隱藏的小額支出",
    ]),
]
_MOONLIGHT_SUGGESTIONS_DEFAULT = [
    "考慮投資理財，讓錢為你工作",
    "繼續保持良好的理財習慣",
    "定期檢視保險與投資配置",
]


def _moonlight_age_multiplier(age: float | None, tables: ReferenceTables) -> float:
    if age is None:
        return 1.0
    if age < tables.moonlight_young_age:
        return tables.moonlight_young_multiplier
    if age > tables.moonlight_senior_age:
        return tables.moonlight_senior_multiplier
    return 1.0


def moonlight_index(data: dict, tables: ReferenceTables) -> CalculationResult:
    """Share of income spent each month, scaled by age and city."""
    salary = data["salary"]
    expenses = data["expenses"]
    if salary <= 0:
        return undefined_result(
            "salary",
            "沒有收入就沒有月光指數，每一筆支出都是透支！",
            _MOONLIGHT_SUGGESTIONS[0][1],
            monthly_balance=-expenses,
        )

    base_index = max(0.0, expenses / salary * 100)
    age_multiplier = _moonlight_age_multiplier(data.get("age"), tables)
    location_multiplier = tables.moonlight_location_multipliers.get(
        data.get("location"), 1.0,
    )
    final_index = min(100.0, base_index * age_multiplier * location_multiplier)

    level, description = pick_band(final_index, _MOONLIGHT_BANDS, _MOONLIGHT_DEFAULT)
    suggestions = pick_band(
        final_index, _MOONLIGHT_SUGGESTIONS, _MOONLIGHT_SUGGESTIONS_DEFAULT,
    )
    return CalculationResult(
        value=round_half_up(final_index),
        level=level,
        description=description,
        details={
            "base_index": round_half_up(base_index),
            "age_multiplier": age_multiplier,
            "location_multiplier": location_multiplier,
            "monthly_balance": salary - expenses,
        },
        suggestions=list(suggestions),
    )


# --- noodle-survival --------------------------------------------------------

_NOODLE_SUGGESTIONS = [
    "可以搭配一些蔬菜和蛋增加營養",
    "建議不要長期只吃泡麵",
    "尋找更多經濟實惠的食物選擇",
]


def noodle_survival(data: dict, tables: ReferenceTables) -> CalculationResult:
    """How many days a budget lasts on instant noodles alone."""
    budget = data["budget"]
    daily_noodles = data["daily_noodles"]
    daily_cost = data["noodle_price"] * daily_noodles
    if daily_cost <= 0:
        return undefined_result(
            "daily_cost",
            "每天的泡麵花費是 0 元，理論上可以撐到天荒地老！",
            _NOODLE_SUGGESTIONS,
            unit="天",
            budget=budget,
            daily_cost=daily_cost,
        )

    ratio = budget / daily_cost
    if not math.isfinite(ratio):
        return undefined_result(
            "daily_cost",
            "每天的泡麵花費趨近於 0 元，預算撐不完了！",
            _NOODLE_SUGGESTIONS,
            unit="天",
            budget=budget,
            daily_cost=daily_cost,
        )

    survival_days = math.floor(ratio)
    if survival_days >= 30:
        description = "恭喜！你可以靠泡麵撐過一個月以上，真正的泡麵大師！"
    elif survival_days >= 14:
        description = "兩週的泡麵生存，足夠等到下次發薪日！"
    elif survival_days >= 7:
        description = "一週泡麵生活，省錢達人的選擇！"
    else:
        description = "泡麵預算有限，建議考慮其他更經濟的選擇！"

    return CalculationResult(
        value=survival_days,
        unit="天",
        description=description,
        details={
            "daily_cost": daily_cost,
            "total_noodles": survival_days * daily_noodles,
            "average_cost_per_day": daily_cost,
        },
        suggestions=list(_NOODLE_SUGGESTIONS),
    )


# --- breakup-cost -----------------------------------------------------------

def breakup_cost(data: dict, tables: ReferenceTables) -> CalculationResult:
    """Money sunk into a relationship plus half the shared assets plus recovery time."""
    months = data["relationship_months"]
    monthly_spending = data["monthly_spending"]

    time_cost = months * monthly_spending
    asset_loss = data["shared_assets"] * tables.breakup_asset_loss_ratio
    emotional_cost = monthly_spending * tables.breakup_recovery_months
    total_cost = time_cost + asset_loss + emotional_cost

    if total_cost >= 500_000:
        description = f"哇！分手成本高達 {thousands(total_cost)} 元，這可以買一台車了！"
    elif total_cost >= 200_000:
        description = f"分手成本 {thousands(total_cost)} 元，相當於一次歐洲旅行的費用！"
    else:
        description = f"分手成本 {thousands(total_cost)} 元，還在可承受範圍內。"

    return CalculationResult(
        value=round_half_up(total_cost),
        unit="元",
        description=description,
        details={
            "time_cost": round_half_up(time_cost),
            "asset_loss": round_half_up(asset_loss),
            "emotional_cost": round_half_up(emotional_cost),
            "relationship_months": months,
        },
        suggestions=[
            "理性看待感情投資，避免過度消費",
            "建立個人財務獨立性",
            "分手前先討論共同資產分配",
        ],
    )


# --- escape-taipei ----------------------------------------------------------

_ESCAPE_SUGGESTIONS = [
    "考慮遠距工作保持台北薪水",
    "研究目標城市的就業機會",
    "計算搬家和適應成本",
]


def escape_taipei(data: dict, tables: ReferenceTables) -> CalculationResult:
    """Monthly savings from keeping a Taipei salary while living elsewhere."""
    current_salary = data["current_salary"]
    target_city = data["target_city"]
    lifestyle_level = data["lifestyle_level"]
    if current_salary <= 0:
        return undefined_result(
            "current_salary",
            f"沒有收入的話，搬到{target_city}也省不了錢，先找份工作吧！",
            _ESCAPE_SUGGESTIONS,
            unit="元/月",
            target_city=target_city,
        )

    cost_ratio = tables.city_cost_ratio.get(target_city, tables.city_cost_ratio_default)
    lifestyle_ratio = tables.lifestyle_multipliers.get(lifestyle_level, 1.0)

    required_salary = current_salary * cost_ratio * lifestyle_ratio
    savings = current_salary - required_salary
    savings_percentage = savings / current_salary * 100
    percent = round_half_up(savings_percentage)

    if savings_percentage > 30:
        description = (
            f"太棒了！逃離台北到{target_city}，你每月可以省下 {thousands(savings)} 元，"
            f"省錢率 {percent}%！"
        )
    elif savings_percentage > 10:
        description = (
            f"搬到{target_city}可以省下 {thousands(savings)} 元，"
            f"省錢率 {percent}%，值得考慮！"
        )
    else:
        description = f"搬到{target_city}只能省下 {thousands(savings)} 元，省錢效果有限。"

    return CalculationResult(
        value=round_half_up(savings),
        unit="元/月",
        description=description,
        details={
            "current_salary": current_salary,
            "required_salary": round_half_up(required_salary),
            "savings_percentage": percent,
            "target_city": target_city,
            "lifestyle_level": lifestyle_level,
        },
        suggestions=list(_ESCAPE_SUGGESTIONS),
    )


# --- car-vs-uber ------------------------------------------------------------

def car_vs_uber(data: dict, tables: ReferenceTables) -> CalculationResult:
    """Monthly cost gap between owning a car and riding Uber."""
    monthly_fuel = data["monthly_fuel"]
    car_payment = data["car_price"] / tables.car_amortization_months
    total_car = (
        car_payment
        + tables.car_monthly_insurance
        + tables.car_monthly_maintenance
        + tables.car_monthly_parking
        + monthly_fuel
    )
    total_uber = data["monthly_trips"] * tables.uber_average_trip_cost
    difference = total_car - total_uber
    gap = thousands(abs(difference))

    if difference > 10_000:
        recommendation = "Uber"
        description = f"養車比搭 Uber 貴 {gap} 元！強烈建議搭 Uber！"
    elif difference > 5_000:
        recommendation = "Uber"
        description = f"養車比搭 Uber 貴 {gap} 元，建議搭 Uber 比較划算。"
    elif difference > -5_000:
        recommendation = "差不多"
        description = f"養車和搭 Uber 成本差不多，差異只有 {gap} 元。"
    else:
        recommendation = "養車"
        description = f"養車比搭 Uber 便宜 {gap} 元，養車較划算！"

    return CalculationResult(
        value=abs(round_half_up(difference)),
        unit="元/月",
        description=description,
        details={
            "car_cost": round_half_up(total_car),
            "uber_cost": round_half_up(total_uber),
            "recommendation": recommendation,
            "breakdown": {
                "car_payment": round_half_up(car_payment),
                "insurance": tables.car_monthly_insurance,
                "maintenance": tables.car_monthly_maintenance,
                "parking": tables.car_monthly_parking,
                "fuel": monthly_fuel,
            },
        },
        suggestions=[
            "考慮用車頻率和距離",
            "評估停車便利性",
            "考慮汽車帶來的生活便利性",
        ],
    )


# --- housing-index ----------------------------------------------------------

_HOUSING_SUGGESTIONS = [
    "考慮搬到租金較便宜的區域",
    "尋找室友分攤租金",
    "善用垂直空間增加收納",
]


def housing_index(data: dict, tables: ReferenceTables) -> CalculationResult:
    """How cramped and overpriced a home is versus the city average (0-100)."""
    living_space = data["living_space"]
    city = data["city"]
    if living_space <= 0:
        return undefined_result(
            "living_space",
            "居住坪數是 0，連蝸牛都沒地方住！",
            _HOUSING_SUGGESTIONS,
            city=city,
        )

    average_rent = tables.city_rent_per_ping.get(city, tables.city_rent_default)
    rent_per_ping = data["rent_price"] / living_space
    space_ratio = living_space / tables.housing_reference_space
    crowding = 1 / space_ratio if space_ratio < 1 else 1
    index = min(100.0, rent_per_ping / average_rent * 100 * crowding)
    shown = round_half_up(index)

    if index >= 80:
        level = "超級蝸居族"
        description = f"你的蝸居指數高達 {shown}！空間小又貴，真正的都市蝸牛！"
    elif index >= 60:
        level = "蝸居中產"
        description = f"蝸居指數 {shown}，在都市生存不容易，加油！"
    else:
        level = "居住幸福"
        description = f"蝸居指數只有 {shown}，你的居住品質還不錯呢！"

    return CalculationResult(
        value=shown,
        level=level,
        description=description,
        details={
            "rent_per_ping": round_half_up(rent_per_ping),
            "city_average": average_rent,
            "space_ratio": round_half_up(space_ratio, 2),
        },
        suggestions=list(_HOUSING_SUGGESTIONS),
    )


# --- food-expense-shocker ---------------------------------------------------

_FOOD_BANDS = [
    (30, ("還算合理", "你的外食支出在可接受範圍內", "維持現狀即可，偶爾在家煮飯會更健康")),
    (50, ("需要注意", "外食支出開始偏高了", "建議增加在家煮飯的頻率，可以節省不少開銷")),
    (70, ("相當震撼", "外食支出已經很高，影響財務規劃", "強烈建議學習基本料理，大幅減少外食頻率")),
    (85, ("極度震撼", "外食支出嚴重超標，財務壓力很大", "緊急狀況！需要立即改變飲食習慣，學會煮飯")),
]
_FOOD_TOP = ("震撼到懷疑人生", "你的外食支出已經到了令人震驚的程度", "請立即採取行動！這樣的支出完全不可持續")

_YEARLY_COST_POINTS = [(200_000, 30), (150_000, 25), (100_000, 20), (50_000, 15)]
_INCOME_SHARE_POINTS = [(30, 30), (20, 25), (15, 20), (10, 15)]

_ALTERNATIVES = [
    (1_000_000, ["一台高級汽車"]),
    (500_000, ["出國旅遊10次"]),
    (200_000, ["一台高級機車", "全新iPhone 50支"]),
    (100_000, ["一年的健身房會籍", "專業攝影器材一套"]),
    (50_000, ["高級筆電一台", "名牌包包5個"]),
    (20_000, ["新手機一支", "好吃的牛排 100 份"]),
]


def food_alternatives(yearly_cost: float) -> list[str]:
    """What a year of eating out could have bought instead (at most 5 items)."""
    items = []
    for threshold, things in _ALTERNATIVES:
        if yearly_cost >= threshold:
            items.extend(things)
    return items[:5]


def food_expense_shocker(data: dict, tables: ReferenceTables) -> CalculationResult:
    """Eating-out spend versus income, scored as a 0-100 shock index."""
    daily_meals = data["daily_meals"]
    avg_meal_cost = data["avg_meal_cost"]
    cooking_frequency = data["cooking_frequency"]
    monthly_income = data["monthly_income"]

    daily_cost = daily_meals * avg_meal_cost
    monthly_cost = daily_cost * 30
    yearly_cost = daily_cost * 365
    home_meal_cost = avg_meal_cost * tables.home_cooking_cost_ratio
    savings = {
        "daily": round_half_up(daily_cost - daily_meals * home_meal_cost),
        "monthly": round_half_up(monthly_cost - daily_meals * home_meal_cost * 30),
        "yearly": round_half_up(yearly_cost - daily_meals * home_meal_cost * 365),
    }
    cooking_benefits = [
        f"每年可省下 NT$ {thousands(savings['yearly'])}",
        "更健康的飲食選擇",
        "培養生活技能",
        "增加家庭時間",
        "減少食品添加物攝取",
    ]
    if monthly_income <= 0:
        return undefined_result(
            "monthly_income",
            "沒有收入的外食支出，每一餐都是在燒存款！",
            cooking_benefits[:4],
            monthly_cost=round_half_up(monthly_cost),
        )

    income_percentage = monthly_cost / monthly_income * 100

    shock = pick_band(yearly_cost, _YEARLY_COST_POINTS, 10)
    shock += pick_band(income_percentage, _INCOME_SHARE_POINTS, 10)
    shock *= tables.cooking_shock_multipliers.get(cooking_frequency, 1.0)
    if daily_meals >= 3:
        shock += 10
    elif daily_meals >= 2:
        shock += 5
    shock_index = min(round_half_up(shock), 100)

    level, description, recommendation = _FOOD_TOP
    for ceiling, outcome in _FOOD_BANDS:
        if shock_index <= ceiling:
            level, description, recommendation = outcome
            break

    return CalculationResult(
        value=shock_index,
        unit="分",
        level=level,
        description=description,
        details={
            "costs": {
                "daily": round_half_up(daily_cost),
                "weekly": round_half_up(daily_cost * 7),
                "monthly": round_half_up(monthly_cost),
                "yearly": round_half_up(yearly_cost),
            },
            "savings": savings,
            "income_percentage": round_half_up(income_percentage, 1),
            "alternatives": food_alternatives(yearly_cost),
            "cooking_benefits": cooking_benefits,
        },
        suggestions=[recommendation, *cooking_benefits[:3]],
    )
