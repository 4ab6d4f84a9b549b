"""
Query string constructors.

Plain string assembly shared by the strategy generators, the generic-term
enhancer, the result padding and the basic fallback builder.
"""


def build_enhanced_keyword_query(keyword: str, descriptor: str) -> str:
    """Examples: build_enhanced_keyword_query("lodge", "rustic") -> 'rustic lodge'"""
    return f"{descriptor} {keyword}"


def build_theme_keyword_query(theme: str, keyword: str) -> str:
    return f"{theme} {keyword}"


def build_entity_context_query(entity: str, context: str) -> str:
    return f"{entity} {context}"


def build_descriptive_query(keyword: str, descriptor: str, setting: str) -> str:
    """Examples: build_descriptive_query("lodge", "warm", "rustic") -> 'warm lodge rustic'"""
    return f"{descriptor} {keyword} {setting}"
