"""wizard — authoring-step state machine."""

from jerseyforge.wizard.navigator import IdentitySection, WizardNavigator, WizardStep

__all__ = ["IdentitySection", "WizardNavigator", "WizardStep"]
