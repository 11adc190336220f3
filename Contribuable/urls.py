from django.urls import path
from . import views

urlpatterns = [
    path('contribuables/batch', views.enregistrer_lot, name='contribuables_batch'),
    path('contribuables', views.enregistrer_un, name='contribuables_create'),
]
