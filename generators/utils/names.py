"""Ghanaian name, merchant and phone number generators for synthetic SMS."""

import random

FIRST_NAMES = [
    "Kwame",
    "Ama",
    "Kofi",
    "Akosua",
    "Yaw",
    "Abena",
    "Kwabena",
    "Efua",
    "Kwaku",
    "Adwoa",
    "Kojo",
    "Esi",
    "Kwesi",
    "Afua",
    "Yaa",
    "Nana",
    "Selasi",
    "Elikem",
    "Dzifa",
    "Ibrahim",
    "Fatima",
    "Abdul",
    "Mariam",
    "Emmanuel",
    "Grace",
    "Samuel",
    "Comfort",
    "Daniel",
    "Gifty",
    "Prince",
]

LAST_NAMES = [
    "Mensah",
    "Boateng",
    "Asante",
    "Owusu",
    "Osei",
    "Agyeman",
    "Appiah",
    "Darko",
    "Amoah",
    "Addo",
    "Quaye",
    "Tetteh",
    "Ansah",
    "Nkrumah",
    "Acheampong",
    "Adjei",
    "Frimpong",
    "Gyamfi",
    "Kuffour",
    "Sarpong",
    "Abubakar",
    "Mahama",
    "Agbeko",
    "Danso",
]

MERCHANTS = [
    "Kwik Mart",
    "Melcom Accra",
    "Shoprite Achimota",
    "Papaye Osu",
    "Total Energies Spintex",
    "Max Mart",
    "Koala Shopping",
    "Kejetia Traders",
    "Palace Mall",
    "Game Stores",
]

# Known fraudulent merchant identifiers, used for fraud injection
SUSPICIOUS_MERCHANTS = ["Unknown Merchant", "Unverified Seller"]

BILLERS = ["ECG Prepaid", "Ghana Water", "DSTV Ghana", "GoTV", "Surfline"]

# Mobile network prefixes by provider
PHONE_PREFIXES = {
    "MTN": ["024", "054", "055", "059"],
    "Vodafone": ["020", "050"],
    "TelecelCash": ["020", "050"],
    "AirtelTigo": ["026", "027", "056", "057"],
}


def random_name() -> tuple[str, str]:
    return random.choice(FIRST_NAMES), random.choice(LAST_NAMES)


def random_full_name() -> str:
    first, last = random_name()
    return f"{first} {last}"


def random_merchant(suspicious_rate: float = 0.0) -> str:
    if random.random() < suspicious_rate:
        return random.choice(SUSPICIOUS_MERCHANTS)
    return random.choice(MERCHANTS)


def random_phone(provider: str = "MTN") -> str:
    prefixes = PHONE_PREFIXES.get(provider, PHONE_PREFIXES["MTN"])
    return f"{random.choice(prefixes)}{random.randint(1000000, 9999999)}"


def random_merchant_code() -> str:
    return str(random.randint(100000, 999999))
