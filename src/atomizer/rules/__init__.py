from atomizer.rules.builtin import DEFAULT_RULES

__all__ = ["DEFAULT_RULES"]
