"""inputcounter — live character counters and enforced maximum lengths for form fields."""

__version__ = "1.5.0"
