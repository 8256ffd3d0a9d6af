from catalog_search.modules.analytics.service import SearchAnalyticsLogger, normalize_query, window_start

__all__ = ["SearchAnalyticsLogger", "normalize_query", "window_start"]
