"""Tool Catalog - the built-in tool definitions, stored as configuration-store rows.

Invariants:
    - Rows use store column names so the same data seeds the SQL store and feeds
      StaticToolConfigSource through parse_tool_row()
    - Field names are snake_case, one canonical schema per tool
    - Option lists mirror the keys of the reference tables the formula reads

Design Decisions:
    - Catalog as data, not code: adding a tool is a row here plus one dispatch entry
"""

from lifeformula.core.reference_tables import DEFAULT_TABLES
from lifeformula.core.tool_definition import ToolDefinition, parse_tool_row

_FREQUENCIES = ["never", "rarely", "sometimes", "often", "daily"]

_RENT_CITIES = [*DEFAULT_TABLES.city_rent_per_ping, "其他"]
_ESCAPE_CITIES = [*DEFAULT_TABLES.city_cost_ratio, "其他"]


def _number(label: str, required: bool = True, **bounds) -> dict:
    return {"type": "number", "required": required, "label": label, **bounds}


def _choice(label: str, options: list[str], required: bool = True) -> dict:
    return {"type": "string", "required": required, "label": label, "options": options}


BUILTIN_TOOL_ROWS: list[dict] = [
    {
        "tool_type": "moonlight-calculator",
        "display_name": "月光族指數計算機",
        "description": "計算你的月光族指數，看看你比多少人更月光",
        "category": "calculator",
        "icon": "💸",
        "input_schema": {
            "salary": _number("月收入", min=0),
            "expenses": _number("月支出", min=0),
            "age": _number("年齡", required=False, min=15, max=100),
            "location": _choice("居住城市", _RENT_CITIES, required=False),
        },
        "calculation_logic": {
            "formula": "(expenses / salary) * 100 * age_factor * city_factor",
            "ranking_data": "taiwan_moonlight_stats",
            "shock_factor": "high",
        },
        "monetization_config": {
            "affiliate_products": ["budgeting_apps", "financial_courses", "investment_platforms"],
            "ad_placement": ["result_page", "share_modal"],
        },
    },
    {
        "tool_type": "noodle-survival",
        "display_name": "泡麵生存計算機",
        "description": "計算如果失業，你可以吃泡麵活多少天",
        "category": "calculator",
        "icon": "🍜",
        "input_schema": {
            "budget": _number("存款金額", min=0),
            "noodle_price": _number("泡麵單價", min=0),
            "daily_noodles": _number("每日泡麵數", min=0, max=10),
        },
        "calculation_logic": {
            "formula": "floor(budget / (noodle_price * daily_noodles))",
            "ranking_data": "taiwan_survival_stats",
            "shock_factor": "extreme",
        },
        "monetization_config": {
            "affiliate_products": ["insurance_products", "emergency_funds", "savings_accounts"],
            "ad_placement": ["result_page", "calculation_form"],
        },
    },
    {
        "tool_type": "breakup-cost",
        "display_name": "分手成本計算機",
        "description": "分析分手將損失多少金錢和回憶",
        "category": "calculator",
        "icon": "💔",
        "input_schema": {
            "relationship_months": _number("交往月數", min=1),
            "monthly_spending": _number("每月花費", min=0),
            "shared_assets": _number("共同資產", min=0),
        },
        "calculation_logic": {
            "formula": "months * spending + shared_assets / 2 + spending * 6",
            "shock_factor": "high",
        },
        "monetization_config": {
            "affiliate_products": ["counseling_services", "legal_services", "self_care_products"],
            "ad_placement": ["result_page", "emotional_support"],
        },
    },
    {
        "tool_type": "escape-taipei",
        "display_name": "逃離台北計算機",
        "description": "計算你需要存多少錢才能逃離台北",
        "category": "calculator",
        "icon": "🏃‍♂️",
        "input_schema": {
            "current_salary": _number("目前薪水", min=0),
            "target_city": _choice("目標城市", _ESCAPE_CITIES),
            "lifestyle_level": _choice("生活水準", ["basic", "comfortable", "luxury"]),
        },
        "calculation_logic": {
            "formula": "salary - salary * city_cost_ratio * lifestyle_ratio",
            "ranking_data": "taiwan_migration_stats",
            "shock_factor": "medium",
        },
        "monetization_config": {
            "affiliate_products": ["real_estate", "moving_services", "job_platforms"],
            "ad_placement": ["result_page", "city_comparison"],
        },
    },
    {
        "tool_type": "phone-lifespan",
        "display_name": "手機壽命計算機",
        "description": "預測你的手機還能撐多少天",
        "category": "calculator",
        "icon": "📱",
        "input_schema": {
            "phone_age_months": _number("手機使用月數", min=0),
            "daily_usage_hours": _number("每日使用時數", min=0, max=24),
            "phone_brand": _choice(
                "手機品牌", list(DEFAULT_TABLES.phone_brand_lifespan_months),
            ),
        },
        "calculation_logic": {
            "formula": "(brand_lifespan - phone_age_months) * 30 * usage_factor",
            "ranking_data": "phone_durability_stats",
            "shock_factor": "medium",
        },
        "monetization_config": {
            "affiliate_products": ["phone_insurance", "new_phones", "repair_services"],
            "ad_placement": ["result_page", "upgrade_suggestions"],
        },
    },
    {
        "tool_type": "car-vs-uber",
        "display_name": "養車 vs Uber 計算機",
        "description": "比較養車和搭 Uber 的成本差異",
        "category": "calculator",
        "icon": "🚗",
        "input_schema": {
            "car_price": _number("車輛價格", min=0),
            "monthly_fuel": _number("每月油費", min=0),
            "monthly_trips": _number("每月搭車次數", min=0),
        },
        "calculation_logic": {
            "formula": "monthly_car_costs - monthly_trips * uber_trip_cost",
            "ranking_data": "transportation_choice_stats",
            "shock_factor": "high",
        },
        "monetization_config": {
            "affiliate_products": ["car_insurance", "uber_credits", "public_transport"],
            "ad_placement": ["result_page", "transportation_ads"],
        },
    },
    {
        "tool_type": "birthday-collision",
        "display_name": "生日撞期計算機",
        "description": "發現全台灣有多少人跟你同天生日",
        "category": "fun",
        "icon": "🎂",
        "input_schema": {
            "birth_month": _number("出生月份", min=1, max=12),
            "birth_day": _number("出生日期", min=1, max=31),
        },
        "calculation_logic": {
            "formula": "(taiwan_population / 365) * special_date_factor",
            "ranking_data": "birthday_distribution_stats",
            "shock_factor": "medium",
        },
        "monetization_config": {
            "affiliate_products": ["birthday_gifts", "party_supplies", "astrology_services"],
            "ad_placement": ["result_page", "birthday_products"],
        },
    },
    {
        "tool_type": "housing-index",
        "display_name": "蝸居指數計算機",
        "description": "比較你的居住空間和其他城市的差異",
        "category": "calculator",
        "icon": "🏠",
        "input_schema": {
            "living_space": _number("居住坪數", min=0),
            "rent_price": _number("租金/房貸", min=0),
            "city": _choice("居住城市", _RENT_CITIES),
        },
        "calculation_logic": {
            "formula": "rent_per_ping / city_average * 100 * crowding_factor",
            "ranking_data": "global_housing_stats",
            "shock_factor": "extreme",
        },
        "monetization_config": {
            "affiliate_products": ["real_estate", "interior_design", "moving_services"],
            "ad_placement": ["result_page", "housing_solutions"],
        },
    },
    {
        "tool_type": "lazy-index-test",
        "display_name": "懶人指數測試",
        "description": "測試你的懶人程度，看看你比多少人更懶",
        "category": "test",
        "icon": "😴",
        "input_schema": {
            "sleep_hours": _number("每日睡眠時數", min=4, max=16),
            "exercise_frequency": _choice("運動頻率", _FREQUENCIES),
            "cooking_frequency": _choice("自己煮飯頻率", _FREQUENCIES),
            "cleaning_frequency": _choice("打掃頻率", _FREQUENCIES),
            "procrastination_level": _number("拖延症程度(1-10)", min=1, max=10),
        },
        "calculation_logic": {"type": "test_scoring", "max_score": 100},
    },
    {
        "tool_type": "gaming-addiction-calculator",
        "display_name": "遊戲成癮計算機",
        "description": "計算你的遊戲成癮程度和每年花費",
        "category": "test",
        "icon": "🎮",
        "input_schema": {
            "daily_hours": _number("每日遊戲時數", min=0, max=24),
            "weekly_spending": _number("每週遊戲花費", min=0),
            "social_impact": _number("社交影響程度(0-10)", min=0, max=10),
            "work_impact": _number("工作/學習影響程度(0-10)", min=0, max=10),
            "sleep_impact": _number("睡眠影響程度(0-10)", min=0, max=10),
        },
        "calculation_logic": {"type": "addiction_scoring", "max_score": 100},
    },
    {
        "tool_type": "aging-simulator",
        "display_name": "變老模擬計算機",
        "description": "模擬你的老化速度，預測未來的你",
        "category": "test",
        "icon": "👴",
        "input_schema": {
            "age": _number("目前年齡", min=18, max=80),
            "smoking": _choice("吸菸狀況", ["never", "light", "heavy"]),
            "drinking": _choice("飲酒頻率", ["never", "moderate", "heavy"]),
            "exercise": _choice("運動習慣", ["never", "occasional", "regular"]),
            "diet": _choice("飲食習慣", ["unhealthy", "average", "healthy"]),
            "stress": _number("壓力程度(1-10)", min=1, max=10),
            "sleep": _number("每日睡眠時數", min=0, max=24),
        },
        "calculation_logic": {"type": "aging_simulation", "baseline_life_expectancy": 80},
    },
    {
        "tool_type": "food-expense-shocker",
        "display_name": "外食花費震撼機",
        "description": "計算你的外食花費，震撼到你重新思考人生",
        "category": "calculator",
        "icon": "🍕",
        "input_schema": {
            "daily_meals": _number("每日外食餐數", min=1, max=5),
            "avg_meal_cost": _number("平均每餐花費", min=0),
            "cooking_frequency": _choice(
                "自己煮飯頻率", ["never", "rarely", "monthly", "weekly", "daily"],
            ),
            "monthly_income": _number("月收入", min=0),
        },
        "calculation_logic": {"type": "expense_calculation", "home_cooking_ratio": 0.3},
    },
]


def builtin_definitions() -> list[ToolDefinition]:
    return [parse_tool_row(row) for row in BUILTIN_TOOL_ROWS]
