from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    # Authentication
    path('register', views.register, name='register'),
    path('login', views.login, name='login'),
    path('logout', views.logout, name='logout'),

    # Password reset
    path('reset-password', views.reset_password, name='reset-password'),
    path('reset-password-confirm', views.reset_password_confirm, name='reset-password-confirm'),
]
