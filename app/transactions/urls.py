from django.urls import path

from transactions.views import TransactionDetailView, TransactionListCreateView

urlpatterns = [
    path('transactions', TransactionListCreateView.as_view(), name='transaction-list-create'),
    path('transactions/<int:pk>', TransactionDetailView.as_view(), name='transaction-detail'),
]
