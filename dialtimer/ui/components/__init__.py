from dialtimer.ui.components.dial_view import DialView, FletHaptics

__all__ = ["DialView", "FletHaptics"]
