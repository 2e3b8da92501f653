# vibejournal/urls.py
from django.contrib import admin
from django.urls import path, include
from rest_framework.routers import DefaultRouter
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from journal.views import JournalEntryViewSet

# API Router
router = DefaultRouter()
router.register(r'journal', JournalEntryViewSet, basename='journal-entry')

urlpatterns = [
    # Admin
    path('admin/', admin.site.urls),

    # Authentication
    path('api/auth/token/', TokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('api/auth/token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),
    path('accounts/', include('accounts.urls')),

    # API endpoints
    path('api/', include(router.urls)),

    # Web views
    path('', include('journal.urls')),
]
