"""Record shapes stored in the document repositories."""

from .models import Model, Profile, Score

__all__ = ["Model", "Profile", "Score"]
