"""Datos de ejemplo para poblar un catálogo vacío (GET /api/seed)."""

IMG = "https://images.unsplash.com/photo-{}?w=400&h=300&fit=crop"

SEED_CATEGORIES = [
    {
        "key": "main",
        "name": "Main Dishes",
        "name_ar": "الأطباق الرئيسية",
        "icon": "🍽️",
        "sort_order": 1,
        "items": [
            ("Grilled Chicken", "دجاج مشوي", "Tender grilled chicken served with rice and vegetables",
             "دجاج طري مشوي يقدم مع الأرز والخضروات", 45.00, "1598103442097-8b74394b95c6"),
            ("Lamb Mandi", "مندي لحم ضأن", "Traditional Yemeni lamb dish with fragrant rice",
             "طبق يمني تقليدي من لحم الضأن مع أرز عطري", 65.00, "1544025162-d76694265947"),
            ("Fish Fillet", "فيليه سمك", "Fresh fish fillet with lemon butter sauce",
             "فيليه سمك طازج مع صلصة الليمون والزبدة", 55.00, "1519708227418-c8fd9a32b7a2"),
            ("Kabsa", "كبسة", "Saudi traditional rice dish with meat",
             "طبق أرز سعودي تقليدي مع اللحم", 50.00, "1563379091339-03b21ab4a4f8"),
        ],
    },
    {
        "key": "appetizers",
        "name": "Appetizers",
        "name_ar": "المقبلات",
        "icon": "🥗",
        "sort_order": 2,
        "items": [
            ("Hummus", "حمص", "Creamy chickpea dip with olive oil and pita bread",
             "غمس الحمص الكريمي مع زيت الزيتون والخبز", 15.00, "1577805947697-89340a0c4d75"),
            ("Tabbouleh", "تبولة", "Fresh parsley salad with tomatoes and bulgur",
             "سلطة بقدونس طازجة مع الطماطم والبرغل", 18.00, "1546793665-c74683f339c1"),
            ("Fattoush", "فتوش", "Lebanese bread salad with fresh vegetables",
             "سلطة خبز لبنانية مع الخضروات الطازجة", 16.00, "1512621776951-a57141f2eefd"),
            ("Moutabal", "متبل", "Smoky eggplant dip with tahini",
             "غمس باذنجان مدخن مع الطحينة", 17.00, "1623428187969-5da2dcea5ebf"),
        ],
    },
    {
        "key": "drinks",
        "name": "Drinks",
        "name_ar": "المشروبات",
        "icon": "🥤",
        "sort_order": 3,
        "items": [
            ("Fresh Orange Juice", "عصير برتقال طازج", "Freshly squeezed orange juice",
             "عصير برتقال معصور طازج", 12.00, "1621506289937-a8e4df240d0b"),
            ("Mango Smoothie", "سموذي مانجو", "Creamy mango smoothie with yogurt",
             "سموذي مانجو كريمي مع الزبادي", 18.00, "1546173159-315724a31696"),
            ("Arabic Coffee", "قهوة عربية", "Traditional Arabic coffee with cardamom",
             "قهوة عربية تقليدية مع الهيل", 8.00, "1514432324607-a09d9b4aefdd"),
            ("Iced Latte", "لاتيه مثلج", "Cold coffee latte with milk",
             "قهوة لاتيه باردة مع الحليب", 15.00, "1461023058943-07fcbe16d735"),
        ],
    },
    {
        "key": "desserts",
        "name": "Desserts",
        "name_ar": "الحلويات",
        "icon": "🍰",
        "sort_order": 4,
        "items": [
            ("Kunafa", "كنافة", "Sweet cheese pastry with syrup",
             "معجنات جبن حلوة مع القطر", 25.00, "1579888944880-d98341245702"),
            ("Baklava", "بقلاوة", "Layers of phyllo pastry with nuts and honey",
             "طبقات من العجين مع المكسرات والعسل", 20.00, "1519676867240-f03562e64548"),
            ("Chocolate Cake", "كيكة شوكولاتة", "Rich chocolate layer cake",
             "كيكة شوكولاتة غنية بالطبقات", 22.00, "1578985545062-69928b1d9587"),
            ("Ice Cream", "آيس كريم", "Assorted flavors of premium ice cream",
             "نكهات متنوعة من الآيس كريم الفاخر", 15.00, "1497034825429-c343d7c6a68f"),
        ],
    },
    {
        "key": "grills",
        "name": "Grills",
        "name_ar": "المشاوي",
        "icon": "🍢",
        "sort_order": 5,
        "items": [
            ("Mixed Grill", "مشكل مشاوي", "Assorted grilled meats with rice",
             "مجموعة مشاوي متنوعة مع الأرز", 75.00, "1544025162-d76694265947"),
            ("Lamb Chops", "ريش لحم", "Grilled lamb chops with herbs",
             "ريش لحم ضأن مشوية مع الأعشاب", 85.00, "1432139555190-58524dae6a55"),
            ("Shish Tawook", "شيش طاووق", "Grilled marinated chicken skewers",
             "أسياخ دجاج متبل مشوية", 45.00, "1603360946369-dc9bb6258143"),
            ("Kebab", "كباب", "Grilled minced meat skewers",
             "أسياخ لحم مفروم مشوية", 50.00, "1599487488170-d11ec9c172f0"),
        ],
    },
]


def category_rows():
    """Campos de cada categoría, indexados por su clave de fixture."""
    return {
        entry["key"]: {
            "name": entry["name"],
            "name_ar": entry["name_ar"],
            "icon": entry["icon"],
            "sort_order": entry["sort_order"],
        }
        for entry in SEED_CATEGORIES
    }


def item_rows(category_ids: dict):
    """
    Campos de los ítems. category_ids mapea clave de fixture -> id generado,
    así que no se depende del orden en que la base devuelva las categorías.
    """
    rows = []
    for entry in SEED_CATEGORIES:
        category_id = category_ids[entry["key"]]
        for position, (name, name_ar, description, description_ar, price, photo) in enumerate(entry["items"], start=1):
            rows.append({
                "name": name,
                "name_ar": name_ar,
                "description": description,
                "description_ar": description_ar,
                "price": price,
                "image": IMG.format(photo),
                "category_id": category_id,
                "sort_order": position,
            })
    return rows
