from django.urls import path
from . import views

urlpatterns = [
    path('reftypes/all', views.get_all_refs, name='api_reftypes_all'),
    path('refTypeActivite/all', views.get_all_types_activite, name='api_ref_type_activite_all'),
]
