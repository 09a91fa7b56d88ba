from .user import LoginRequest, PasswordChangeRequest, ProfileRequest, SocialAccounts, UserRequest, UserResponse

__all__ = ["LoginRequest", "PasswordChangeRequest", "ProfileRequest", "SocialAccounts", "UserRequest", "UserResponse"]
