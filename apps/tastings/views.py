from drf_spectacular.utils import (
    OpenApiParameter,
    extend_schema,
    extend_schema_view,
    inline_serializer,
)
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.common.fields import validate_path_uuid, validate_path_uuid_and_body
from apps.common.pagination import paginated_response
from .serializers import (
    TastingNoteCreateSerializer,
    TastingNoteSelectQuerySerializer,
    TastingNoteSerializer,
    TastingNotesQuerySerializer,
    TastingNoteUpdateSerializer,
)
from .services import (
    BlendNotFoundError,
    TastingNoteNotFoundError,
    create_tasting_note,
    delete_tasting_note,
    get_tasting_note,
    list_tasting_notes,
    select_tasting_notes,
    update_tasting_note,
)


ID_PARAMETER = OpenApiParameter('id', str, OpenApiParameter.PATH, description='Tasting note UUID')


@extend_schema_view(
    list=extend_schema(parameters=[TastingNotesQuerySerializer], tags=['tasting-notes']),
    retrieve=extend_schema(parameters=[ID_PARAMETER], responses=TastingNoteSerializer, tags=['tasting-notes']),
    create=extend_schema(
        request=TastingNoteCreateSerializer,
        responses={201: TastingNoteSerializer},
        tags=['tasting-notes'],
    ),
    partial_update=extend_schema(
        parameters=[ID_PARAMETER],
        request=TastingNoteUpdateSerializer,
        responses=TastingNoteSerializer,
        tags=['tasting-notes'],
    ),
    destroy=extend_schema(parameters=[ID_PARAMETER], responses={204: None}, tags=['tasting-notes']),
)
class TastingNoteViewSet(viewsets.ViewSet):
    """
    The authenticated user's tasting notes.

    list: Filtered, sorted, paginated notes
    create: Record a tasting of an existing blend
    retrieve: A single note
    partial_update: Change some fields of a note
    destroy: Delete a note permanently
    select: Two notes side by side for comparison
    """

    permission_classes = [IsAuthenticated]

    def list(self, request):
        query = TastingNotesQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        page = list_tasting_notes(user=request.user, **query.validated_data)
        return paginated_response(page, TastingNoteSerializer)

    def create(self, request):
        serializer = TastingNoteCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            note = create_tasting_note(user=request.user, **serializer.validated_data)
        except BlendNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(TastingNoteSerializer(note).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None):
        note_id = validate_path_uuid(pk)

        try:
            note = get_tasting_note(user=request.user, note_id=note_id)
        except TastingNoteNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(TastingNoteSerializer(note).data)

    def partial_update(self, request, pk=None):
        serializer = TastingNoteUpdateSerializer(data=request.data)
        note_id = validate_path_uuid_and_body(pk, serializer)

        try:
            note = update_tasting_note(
                user=request.user,
                note_id=note_id,
                data=serializer.validated_data,
            )
        except TastingNoteNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(TastingNoteSerializer(note).data)

    def destroy(self, request, pk=None):
        note_id = validate_path_uuid(pk)

        try:
            delete_tasting_note(user=request.user, note_id=note_id)
        except TastingNoteNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        parameters=[TastingNoteSelectQuerySerializer],
        responses=inline_serializer(
            name='TastingNoteSelectResponse',
            fields={'notes': TastingNoteSerializer(many=True)},
        ),
        tags=['tasting-notes'],
    )
    @action(detail=False, methods=['get'])
    def select(self, request):
        """Get two notes, in the requested order, for comparison."""
        query = TastingNoteSelectQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        try:
            notes = select_tasting_notes(user=request.user, note_ids=query.validated_data['ids'])
        except TastingNoteNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response({'notes': TastingNoteSerializer(notes, many=True).data})
