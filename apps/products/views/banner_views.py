"""
Banner views.
"""
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework import status

from apps.common.exceptions import ServiceError
from apps.common.utils import (
    success_response, list_response, parse_bool, server_error, service_error_response
)
from ..serializers import BannerSerializer
from ..services import BannerService


class BannerListCreateView(APIView):
    """List banners (filter by ``bannerType`` and ``published``) or create one"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        try:
            published = request.GET.get('published')
            banners = BannerService.list_banners(
                request.GET.get('bannerType') or None,
                parse_bool(published) if published not in (None, '') else None,
            )
            return list_response(banners, BannerSerializer, request, 'Banners retrieved successfully')
        except Exception as e:
            return server_error(e)

    def post(self, request):
        try:
            banner = BannerService.create_banner(request.data, request.FILES.get('image'))
            return success_response(BannerSerializer(banner).data, 'Banner created successfully', status.HTTP_201_CREATED)
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)


class BannerDetailView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        try:
            banner = BannerService.get_banner(pk)
            return success_response(BannerSerializer(banner).data, 'Banner retrieved successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)

    def patch(self, request, pk):
        try:
            banner = BannerService.get_banner(pk)
            banner = BannerService.update_banner(banner, request.data, request.FILES.get('image'))
            return success_response(BannerSerializer(banner).data, 'Banner updated successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)

    put = patch

    def delete(self, request, pk):
        try:
            BannerService.delete_banner(BannerService.get_banner(pk))
            return success_response(None, 'Banner deleted successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)


class BannerPublishToggleView(APIView):
    permission_classes = [IsAuthenticated]

    def patch(self, request, pk):
        try:
            banner = BannerService.toggle_publish(BannerService.get_banner(pk))
            return success_response(BannerSerializer(banner).data, 'Banner publish status updated successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)
