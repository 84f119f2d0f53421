from django.contrib import admin
from django.urls import path, include

from mlm.views import ActionView

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/server', ActionView.as_view()),
    path('api/server/', ActionView.as_view(), name='action-server'),
    path('api/users/', include('users.urls')),
    path('api/mlm/', include('mlm.urls')),
    path('api/wallet/', include('wallet.urls')),
]
