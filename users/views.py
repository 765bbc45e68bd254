"""
User Views

Authentication and profile endpoints.
"""

from rest_framework import status
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated, AllowAny
from rest_framework_simplejwt.views import TokenRefreshView

from core.responses import success_response
from .serializers import UserSerializer, RegisterSerializer, LoginSerializer


class RegisterView(APIView):
    """
    User registration endpoint.

    POST /api/v1/auth/register/
    """
    permission_classes = [AllowAny]
    user_service = None

    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        user = self.user_service.register(
            email=data["email"],
            username=data["username"],
            password=data["password"],
            **serializer.profile_fields(),
        )

        return success_response(
            {"user": UserSerializer(user).data, "tokens": self.user_service.issue_tokens(user)},
            message="User registered successfully",
            status=status.HTTP_201_CREATED,
        )


class LoginView(APIView):
    """
    User login endpoint.

    POST /api/v1/auth/login/
    """
    permission_classes = [AllowAny]
    user_service = None

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = self.user_service.login(
            request,
            email=serializer.validated_data["email"],
            password=serializer.validated_data["password"],
        )

        return success_response(
            {"user": UserSerializer(user).data, "tokens": self.user_service.issue_tokens(user)},
            message="Login successful",
        )


class RefreshView(TokenRefreshView):
    """
    Exchange a refresh token for a new access token.

    POST /api/v1/auth/refresh/
    """

    def post(self, request, *args, **kwargs):
        response = super().post(request, *args, **kwargs)
        return success_response(response.data, status=response.status_code)


class ProfileView(APIView):
    """
    User profile endpoint.

    GET /api/v1/auth/profile/ - Get current user profile
    PATCH /api/v1/auth/profile/ - Update profile
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return success_response(UserSerializer(request.user).data)

    def patch(self, request):
        serializer = UserSerializer(request.user, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return success_response(serializer.data, message="Profile updated successfully")
