
class EduConsoleError(Exception):
    """Base exception for all edu_console errors"""
    pass

class ConfigError(EduConsoleError):
    """Invalid or inconsistent global.json / table / chart config"""
    pass

class UnknownColumnError(EduConsoleError, KeyError):
    """A sort or lookup referenced a column key that no descriptor declares"""
    pass

class ColumnNotSortableError(EduConsoleError):
    """Sort requested on a column whose descriptor has sortable=False"""
    pass

class PaginationError(EduConsoleError, ValueError):
    """
    Page size or page number outside the allowed range
    page_size must be > 0, totals must be >= 0
    """
    pass

class ChartDataError(EduConsoleError, ValueError):
    """Series input that breaks the alignment contract (duplicate keys within one series)"""
    pass
