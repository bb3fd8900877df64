"""
Processor: paypal
-----------------

Wallet transfer.
"""
from storefront.payments.base import SimulatedPaymentProcessor
from storefront.payments.catalogue import register_processor


@register_processor
class PayPalPaymentProcessor(SimulatedPaymentProcessor):
    method = "paypal"
    latency_ms = 150
