from enum import Enum


class PaymentMethod(str, Enum):
    cash = "Cash"
    credit_card = "Credit Card"
    debit_card = "Debit Card"
    pix = "Pix"
