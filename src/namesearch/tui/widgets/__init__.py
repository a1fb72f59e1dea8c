from .name_search import NameSearch, SuggestionList

__all__ = ["NameSearch", "SuggestionList"]
