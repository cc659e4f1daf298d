class WizardExit(Exception):
    """Raised when the user cancels the wizard."""
    pass


class WizardRestart(Exception):
    """Raised when the user asks to start the wizard over."""
    pass
