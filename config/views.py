from django.http import JsonResponse


def health_check(request):
    """Liveness probe for the hosting platform."""
    return JsonResponse({'status': 'ok'})


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'error': 'Not found',
    }, status=404)


def error_500(request):
    """Custom 500 handler. Django has already logged the exception."""
    return JsonResponse({
        'error': 'Internal server error',
    }, status=500)
