# journal/urls.py
from django.urls import path
from . import views

app_name = 'journal'

urlpatterns = [
    path('', views.ArchiveView.as_view(), name='archive'),
    path('entries/new/', views.EntryCreateView.as_view(), name='entry_create'),
]
