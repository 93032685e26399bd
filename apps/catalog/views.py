from drf_spectacular.utils import OpenApiParameter, extend_schema, extend_schema_view
from rest_framework import status, viewsets
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.response import Response

from apps.common.fields import validate_path_uuid
from apps.common.pagination import paginated_response
from .serializers import (
    BlendCreateSerializer,
    BlendSerializer,
    BlendsQuerySerializer,
    BrandSerializer,
    BrandsQuerySerializer,
    RegionSerializer,
    RegionsQuerySerializer,
)
from .services import (
    BlendNotFoundError,
    BrandNotFoundError,
    CatalogDatabaseError,
    DuplicateBlendError,
    RegionNotFoundError,
    create_blend,
    get_blend_by_id,
    get_region_by_id,
    list_blends,
    list_brands,
    list_regions,
)


ID_PARAMETER = OpenApiParameter('id', str, OpenApiParameter.PATH, description='UUID')


@extend_schema_view(
    list=extend_schema(parameters=[BrandsQuerySerializer], tags=['catalog']),
)
class BrandViewSet(viewsets.ViewSet):
    """
    Public brand listing.

    list: Brands ordered by name, optionally filtered by ?search=
    """

    permission_classes = [IsAuthenticatedOrReadOnly]

    def list(self, request):
        query = BrandsQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        page = list_brands(**query.validated_data)
        return paginated_response(page, BrandSerializer)


@extend_schema_view(
    list=extend_schema(parameters=[RegionsQuerySerializer], tags=['catalog']),
    retrieve=extend_schema(parameters=[ID_PARAMETER], responses=RegionSerializer, tags=['catalog']),
)
class RegionViewSet(viewsets.ViewSet):
    """
    Public region listing.

    list: Regions ordered by name, optionally filtered by ?search=
    retrieve: A single region
    """

    permission_classes = [IsAuthenticatedOrReadOnly]

    def list(self, request):
        query = RegionsQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        page = list_regions(**query.validated_data)
        return paginated_response(page, RegionSerializer)

    def retrieve(self, request, pk=None):
        region_id = validate_path_uuid(pk)

        try:
            region = get_region_by_id(region_id=region_id)
        except RegionNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(RegionSerializer(region).data)


@extend_schema_view(
    list=extend_schema(parameters=[BlendsQuerySerializer], tags=['catalog']),
    retrieve=extend_schema(parameters=[ID_PARAMETER], responses=BlendSerializer, tags=['catalog']),
    create=extend_schema(request=BlendCreateSerializer, responses={201: BlendSerializer}, tags=['catalog']),
)
class BlendViewSet(viewsets.ViewSet):
    """
    Blends: public reads, authenticated creation.

    list: Blends ordered by name, filtered by brand_id, region_id, search
    retrieve: A single blend with brand and region
    create: Create a blend, resolving brand and region by id or name
    """

    permission_classes = [IsAuthenticatedOrReadOnly]

    def list(self, request):
        query = BlendsQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        page = list_blends(**query.validated_data)
        return paginated_response(page, BlendSerializer)

    def retrieve(self, request, pk=None):
        blend_id = validate_path_uuid(pk)

        try:
            blend = get_blend_by_id(blend_id=blend_id)
        except BlendNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(BlendSerializer(blend).data)

    def create(self, request):
        serializer = BlendCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            blend = create_blend(**serializer.validated_data)
        except (BrandNotFoundError, RegionNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except DuplicateBlendError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
        except CatalogDatabaseError:
            # Details were logged by the service; don't leak them
            return Response(
                {'error': 'Internal server error'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        return Response(BlendSerializer(blend).data, status=status.HTTP_201_CREATED)
