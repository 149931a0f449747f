"""
API error handling.

Every error leaves the API as JSON with a ``message`` key:

- 400 validation errors also carry ``errors`` (field -> messages)
- 401 when the session is missing
- 404 when a record does not exist or belongs to another farm; a view
  may set ``not_found_message`` to name the record
- 500 for anything unexpected (logged with traceback)
"""

import logging

from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

UNAUTHORIZED_MESSAGE = 'Não autorizado'
VALIDATION_MESSAGE = 'Dados inválidos'
NOT_FOUND_MESSAGE = 'Registro não encontrado'
INTERNAL_ERROR_MESSAGE = 'Erro interno do servidor'


class DomainError(Exception):
    """Business rule violation raised by the service layer (HTTP 400)."""

    default_message = 'Operação inválida'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InsufficientStockError(DomainError):
    default_message = 'Estoque insuficiente'


class ProtectedMovementError(DomainError):
    default_message = 'Movimentação gerada por coleta não pode ser excluída diretamente'


def _first_message(detail):
    """Pull the first human readable message out of a DRF error detail."""
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
    if isinstance(detail, (list, tuple)):
        for value in detail:
            return _first_message(value)
    return str(detail) if detail else VALIDATION_MESSAGE


def api_exception_handler(exc, context):
    """
    DRF EXCEPTION_HANDLER that normalises error bodies to ``{message}``.
    """
    view = context.get('view')
    view_name = view.__class__.__name__ if view else 'unknown'

    if isinstance(exc, DomainError):
        logger.info(f"{view_name}: {exc.message}")
        return Response({'message': exc.message}, status=status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
        # SessionAuthentication has no WWW-Authenticate header, so DRF would answer 403
        return Response({'message': UNAUTHORIZED_MESSAGE}, status=status.HTTP_401_UNAUTHORIZED)

    if isinstance(exc, exceptions.ValidationError):
        return Response(
            {'message': VALIDATION_MESSAGE, 'errors': exc.detail},
            status=status.HTTP_400_BAD_REQUEST
        )

    if isinstance(exc, (Http404, exceptions.NotFound)):
        # Detail views name their record, e.g. "Coleta não encontrada"
        message = getattr(view, 'not_found_message', NOT_FOUND_MESSAGE)
        return Response({'message': message}, status=status.HTTP_404_NOT_FOUND)

    response = exception_handler(exc, context)
    if response is not None:
        detail = getattr(exc, 'detail', None)
        response.data = {'message': _first_message(detail)}
        return response

    logger.exception(f"Unhandled error in {view_name}: {exc}")
    return Response(
        {'message': INTERNAL_ERROR_MESSAGE},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
