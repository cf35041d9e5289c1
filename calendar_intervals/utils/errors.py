# calendar_intervals/utils/errors.py
class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided config (grouping, offset, precision).
    Should NOT print traceback.
    """
