# Terms used only in British English, mapped to the American term for the same thing.
BRITISH_ONLY = {
    "aubergine": "eggplant",
    "bank holiday": "public holiday",
    "bicky": "cookie",
    "biscuit": "cookie",
    "bits and bobs": "odds and ends",
    "bum bag": "fanny pack",
    "car boot sale": "swap meet",
    "car park": "parking lot",
    "chippy": "fish-and-chip shop",
    "courgette": "zucchini",
    "crisps": "potato chips",
    "dual carriageway": "divided highway",
    "footie": "soccer",
    "funfair": "carnival",
    "lorry": "truck",
    "mobile phone": "cell phone",
    "motorway": "freeway",
    "nappy": "diaper",
    "paracetamol": "tylenol",
    "pavement": "sidewalk",
    "petrol": "gasoline",
    "postcode": "zip code",
    "queue": "line",
    "torch": "flashlight",
    "trainers": "sneakers",
    "whilst": "while",
}
