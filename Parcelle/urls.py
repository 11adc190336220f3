from django.urls import path
from . import views

urlpatterns = [
    path('parcelles/batch', views.enregistrer_lot, name='parcelles_batch'),
    path('parcelles', views.enregistrer_une, name='parcelles_create'),
]
