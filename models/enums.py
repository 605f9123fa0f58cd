from enum import Enum


class MetricKey(str, Enum):
    NOISE = "noise"
    LIGHT = "light"
    CRIME = "crime"
    INTERNET_SPEED = "internet_speed"
    DEMOGRAPHICS = "demographics"
    GROCERY_STORES = "grocery_stores"
    LAUNDROMATS = "laundromats"
    PARKING = "parking"
