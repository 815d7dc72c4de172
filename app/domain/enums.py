# app/domain/enums.py
from enum import Enum


class UserRole(str, Enum):
    CUSTOMER = "CUSTOMER"
    ADMIN = "ADMIN"


class OrderStatus(str, Enum):
    #zamowienie powstaje od razu jako CONFIRMED i juz sie nie zmienia
    CONFIRMED = "CONFIRMED"
