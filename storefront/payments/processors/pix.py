"""
Processor: pix
--------------

Instant bank transfer. Fastest of the simulated providers.
"""
from storefront.payments.base import SimulatedPaymentProcessor
from storefront.payments.catalogue import register_processor


@register_processor
class PixPaymentProcessor(SimulatedPaymentProcessor):
    method = "pix"
    latency_ms = 100
