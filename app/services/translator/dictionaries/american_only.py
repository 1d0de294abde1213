# Terms used only in American English, mapped to the British term for the same thing.
AMERICAN_ONLY = {
    "acetaminophen": "paracetamol",
    "apartment": "flat",
    "candy": "sweets",
    "cell phone": "mobile phone",
    "condo": "flat",
    "cookie": "biscuit",
    "diaper": "nappy",
    "eggplant": "aubergine",
    "elevator": "lift",
    "fanny pack": "bum bag",
    "faucet": "tap",
    "flashlight": "torch",
    "freeway": "motorway",
    "french fries": "chips",
    "gas station": "petrol station",
    "gasoline": "petrol",
    "mailman": "postman",
    "odds and ends": "bits and bobs",
    "parking garage": "multi-storey car park",
    "parking lot": "car park",
    "play hooky": "bunk off",
    "potato chips": "crisps",
    "restroom": "toilet",
    "rube goldberg machine": "Heath Robinson device",
    "sidewalk": "pavement",
    "sneakers": "trainers",
    "swap meet": "car boot sale",
    "trash can": "bin",
    "trashcan": "bin",
    "truck": "lorry",
    "tylenol": "paracetamol",
    "vacation": "holiday",
    "zip code": "postcode",
    "zucchini": "courgette",
}
