from .peak import is_peak, peak, peaks, raise_peak

__all__ = ["is_peak", "peak", "peaks", "raise_peak"]
