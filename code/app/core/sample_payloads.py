SAMPLE_REQUEST = {
    "title": "Osoba 1",
    "income": 30000,
    "other_income": 0,
    "is_osvc": False,
    "expenses": 20000,
    "passive_income": 0,
    "pension_levels": [8580, 10074, 14883],
}

SAMPLE_HOUSEHOLD = {
    "people": [
        SAMPLE_REQUEST,
        {
            "title": "Osoba 2",
            "income": 45000,
            "other_income": 30000,
            "is_osvc": True,
            "expenses": 20000,
            "passive_income": 2000,
        },
    ],
}
