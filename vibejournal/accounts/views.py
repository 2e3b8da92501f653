# accounts/views.py
import logging

from django.shortcuts import render, redirect
from django.contrib.auth import login, logout, authenticate
from django.contrib.auth.decorators import login_required
from django.contrib import messages
from django.utils.decorators import method_decorator
from django.utils.http import url_has_allowed_host_and_scheme
from django.views import View
from django.views.generic import TemplateView
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken

from journal.models import JournalEntry
from journal.policies import ENTRY_POLICY
from .forms import UserRegistrationForm, UserLoginForm, ProfileUpdateForm
from .policies import IsProfileOwner
from .serializers import UserSerializer, RegisterSerializer, ProfileSerializer
from .services import get_profile, set_display_name

logger = logging.getLogger(__name__)


def issue_tokens(user):
    refresh = RefreshToken.for_user(user)
    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }


class RegisterView(View):
    """User registration view"""

    template_name = 'accounts/register.html'

    def get(self, request):
        if request.user.is_authenticated:
            return redirect('journal:archive')
        form = UserRegistrationForm()
        return render(request, self.template_name, {'form': form})

    def post(self, request):
        form = UserRegistrationForm(request.POST)
        if form.is_valid():
            user = form.save()
            logger.info("Registered user %s", user.pk)
            messages.success(request, 'Registration successful! Please log in.')
            return redirect('accounts:login')

        return render(request, self.template_name, {'form': form})


class LoginView(View):
    """User login view"""

    template_name = 'accounts/login.html'

    def get(self, request):
        if request.user.is_authenticated:
            return redirect('journal:archive')
        form = UserLoginForm()
        return render(request, self.template_name, {'form': form, 'next': request.GET.get('next', '')})

    def post(self, request):
        form = UserLoginForm(request.POST)
        next_url = request.POST.get('next') or request.GET.get('next', '')
        if form.is_valid():
            username = form.cleaned_data['username']
            password = form.cleaned_data['password']
            user = authenticate(request, username=username, password=password)

            if user is not None:
                login(request, user)
                logger.info("User %s signed in", user.pk)
                messages.success(request, f'Welcome back, {user.display_name}!')

                if next_url and url_has_allowed_host_and_scheme(
                    next_url, allowed_hosts={request.get_host()}, require_https=request.is_secure()
                ):
                    return redirect(next_url)
                return redirect('journal:archive')
            else:
                messages.error(request, 'Invalid username or password.')

        return render(request, self.template_name, {'form': form, 'next': next_url})


class LogoutView(View):
    """End the session and return to the sign-in page"""

    def post(self, request):
        if request.user.is_authenticated:
            logger.info("User %s signed out", request.user.pk)
        logout(request)
        messages.info(request, 'You have been logged out successfully.')
        return redirect('accounts:login')


class ProfileView(TemplateView):
    """View user profile"""

    template_name = 'accounts/profile.html'

    @method_decorator(login_required)
    def dispatch(self, *args, **kwargs):
        return super().dispatch(*args, **kwargs)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        user = self.request.user

        context['profile'] = get_profile(user)
        context['total_entries'] = ENTRY_POLICY.scope(JournalEntry.objects.all(), user).count()
        return context


class ProfileUpdateView(View):
    """Update the display name"""

    template_name = 'accounts/profile_update.html'

    @method_decorator(login_required)
    def dispatch(self, *args, **kwargs):
        return super().dispatch(*args, **kwargs)

    def get(self, request):
        form = ProfileUpdateForm(instance=get_profile(request.user))
        return render(request, self.template_name, {'form': form})

    def post(self, request):
        form = ProfileUpdateForm(request.POST, instance=get_profile(request.user))
        if form.is_valid():
            set_display_name(request.user, form.cleaned_data['display_name'])
            messages.success(request, 'Profile updated successfully!')
            return redirect('accounts:profile')

        return render(request, self.template_name, {'form': form})


# API Views for REST endpoints
class RegisterAPIView(APIView):
    """API endpoint for user registration"""

    permission_classes = [AllowAny]

    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        if serializer.is_valid():
            user = serializer.save()
            logger.info("Registered user %s via API", user.pk)

            return Response({
                'message': 'User registered successfully',
                'user': UserSerializer(user).data,
                'tokens': issue_tokens(user),
            }, status=status.HTTP_201_CREATED)

        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


class LoginAPIView(APIView):
    """API endpoint for user login"""

    permission_classes = [AllowAny]

    def post(self, request):
        username = request.data.get('username')
        password = request.data.get('password')

        if not username or not password:
            return Response(
                {'error': 'Username and password are required'},
                status=status.HTTP_400_BAD_REQUEST
            )

        user = authenticate(username=username, password=password)

        if user is None:
            return Response(
                {'error': 'Invalid credentials'},
                status=status.HTTP_401_UNAUTHORIZED
            )

        logger.info("User %s signed in via API", user.pk)
        return Response({
            'message': 'Login successful',
            'user': UserSerializer(user).data,
            'tokens': issue_tokens(user),
        })


class SessionAPIView(APIView):
    """Current user and profile for the presented credentials"""

    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response({
            'user': UserSerializer(request.user).data,
            'profile': ProfileSerializer(get_profile(request.user)).data,
        })


class LogoutAPIView(APIView):
    """Revoke a refresh token and drop any cookie session"""

    permission_classes = [IsAuthenticated]

    def post(self, request):
        token = request.data.get('refresh')
        if token:
            try:
                RefreshToken(token).blacklist()
            except TokenError as exc:
                return Response({'error': str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        logger.info("User %s signed out via API", request.user.pk)
        logout(request._request)
        return Response(status=status.HTTP_205_RESET_CONTENT)


class ProfileAPIView(APIView):
    """API endpoint for the caller's own profile"""

    permission_classes = [IsAuthenticated, IsProfileOwner]

    def get_object(self):
        profile = get_profile(self.request.user)
        self.check_object_permissions(self.request, profile)
        return profile

    def get(self, request):
        serializer = ProfileSerializer(self.get_object())
        return Response(serializer.data)

    def put(self, request):
        serializer = ProfileSerializer(self.get_object(), data=request.data, partial=True)
        if serializer.is_valid():
            serializer.save()
            return Response(serializer.data)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    def patch(self, request):
        return self.put(request)
