from fastapi import status

class BaseAppException(Exception):
    """Base exception for application"""
    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self):
        """Return error response body"""
        return {"error": self.message}

class InvalidInputException(BaseAppException):
    """Raised when a caller passes a malformed value"""
    def __init__(self, message: str = "Invalid input"):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)

class MovieNotFoundException(BaseAppException):
    """Raised when a movie is not in the database"""
    def __init__(self, message: str = "Movie Not Found"):
        super().__init__(message, status.HTTP_404_NOT_FOUND)

    def to_dict(self):
        """Not-found responses carry a status instead of an error"""
        return {"status": self.message}

class UpstreamServiceException(BaseAppException):
    """Raised when Netzkino, TMDB or OpenAI cannot be reached"""
    def __init__(self, message: str = "Upstream service error", status_code: int = None):
        self.upstream_status = status_code
        super().__init__(message, status.HTTP_502_BAD_GATEWAY)

class DatabaseException(BaseAppException):
    """Raised when a MongoDB operation fails"""
    def __init__(self, message: str = "Database error"):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR)
