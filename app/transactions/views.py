from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from transactions.models import Transaction
from transactions.serializers import TransactionSerializer
from transactions.store import create_transaction, delete_transaction, get_transaction, list_transactions, update_transaction
from utils import api_response


class TransactionListCreateView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        search = request.query_params.get('search', '')
        transactions = list_transactions(request.user, search=search)
        serializer = TransactionSerializer(transactions, many=True)
        return api_response(status.HTTP_200_OK, "Transactions retrieved", serializer.data)

    def post(self, request):
        try:
            pk = create_transaction(request.user, request.data)
        except ValidationError as e:
            return api_response(status.HTTP_400_BAD_REQUEST, "Invalid data", e.detail)

        serializer = TransactionSerializer(get_transaction(request.user, pk))
        return api_response(status.HTTP_201_CREATED, "Transaction added", serializer.data)


class TransactionDetailView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        try:
            transaction = get_transaction(request.user, pk)
        except Transaction.DoesNotExist:
            return api_response(status.HTTP_404_NOT_FOUND, "Transaction not found")
        return api_response(status.HTTP_200_OK, "Transaction retrieved", TransactionSerializer(transaction).data)

    def patch(self, request, pk):
        try:
            transaction = update_transaction(request.user, pk, request.data)
        except Transaction.DoesNotExist:
            return api_response(status.HTTP_404_NOT_FOUND, "Transaction not found")
        except ValidationError as e:
            return api_response(status.HTTP_400_BAD_REQUEST, "Invalid data", e.detail)
        return api_response(status.HTTP_200_OK, "Transaction updated", TransactionSerializer(transaction).data)

    def delete(self, request, pk):
        try:
            delete_transaction(request.user, pk)
        except Transaction.DoesNotExist:
            return api_response(status.HTTP_404_NOT_FOUND, "Transaction not found")
        return api_response(status.HTTP_200_OK, "Transaction deleted")
