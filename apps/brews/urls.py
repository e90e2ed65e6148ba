from django.urls import path
from . import views

app_name = 'brews'

urlpatterns = [
    # Page
    path('', views.brew_log, name='log'),

    # API
    # GET  /api/brews/?filter=today|week|all  - Filtered history + counters
    # POST /api/brews/                        - Log a brew
    path('api/brews/', views.brew_list, name='brew-list'),
]
