import logging

from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.views import APIView

from tariffs.cost import categories_for
from tariffs.exceptions import UnknownTariff
from tariffs.serializers import QuoteSerializer
from tariffs.table import CATEGORIES
from utils import api_response

logger = logging.getLogger(__name__)


class CategoryOptionsView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        transaction_type = request.query_params.get('type')
        if not transaction_type:
            data = {kind.value: list(categories) for kind, categories in CATEGORIES.items()}
            return api_response(status.HTTP_200_OK, "Categories retrieved", data)

        try:
            categories = categories_for(transaction_type)
        except UnknownTariff as e:
            return api_response(status.HTTP_400_BAD_REQUEST, str(e))
        return api_response(status.HTTP_200_OK, f"{transaction_type} categories retrieved", list(categories))


class QuoteView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = QuoteSerializer(data=request.data)
        if serializer.is_valid():
            return api_response(status.HTTP_200_OK, "Cost calculated", serializer.data)

        logger.warning("Rejected cost quote for user %s: %s", request.user.id, serializer.errors)
        return api_response(status.HTTP_400_BAD_REQUEST, "Invalid data", serializer.errors)
