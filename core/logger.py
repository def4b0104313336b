import logging

log = logging.getLogger("invoice_backend")
