"""
Processor: creditcard
---------------------

Card authorization. Slowest of the simulated providers.
"""
from storefront.payments.base import SimulatedPaymentProcessor
from storefront.payments.catalogue import register_processor


@register_processor
class CreditCardPaymentProcessor(SimulatedPaymentProcessor):
    method = "creditcard"
    latency_ms = 200
