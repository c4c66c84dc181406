from rest_framework.views import APIView
from rest_framework_simplejwt.authentication import JWTAuthentication


class BaseAPIView(APIView):
    """
    Unified base class for all API views.

    Features:
    - JWT authentication; requests without a token run as anonymous
    - Service layer integration

    Note: Exception handling is centralized in the DRF exception handler.
    """

    authentication_classes = (JWTAuthentication,)

    def get_service(self):
        """
        Subclasses must implement this to return appropriate service instance.

        Raises:
            NotImplementedError: If not implemented by subclass
        """
        raise NotImplementedError('Subclasses must implement get_service()')

    def get_actor_id(self):
        """Id of the authenticated user, or None for anonymous requests"""
        return get_actor_id(self.request)


def get_actor_id(request):
    user = getattr(request, 'user', None)
    if user is None or not user.is_authenticated:
        return None
    return user.id
