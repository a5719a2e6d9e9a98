from django.urls import path

from tariffs.views import CategoryOptionsView, QuoteView

app_name = 'tariffs'

urlpatterns = [
    path('categories', CategoryOptionsView.as_view(), name='categories'),
    path('quote', QuoteView.as_view(), name='quote'),
]
