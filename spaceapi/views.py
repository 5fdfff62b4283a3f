import logging
from django.conf import settings
from django.contrib import admin, messages
from django.contrib.admin.views.decorators import staff_member_required
from django.http import Http404, HttpResponseRedirect, JsonResponse
from django.shortcuts import redirect, render
from django.utils.translation import gettext_lazy as _
from django_smart_ratelimit import rate_limit

from .apps import get_registry
from .dispatch import JsonDocument, PassThrough, dispatch
from .forms import SpaceSettingsForm

logger = logging.getLogger(__name__)

SPACEAPI_RATELIMIT_PER_MINUTE = getattr(settings, 'SPACEAPI_RATELIMIT_PER_MINUTE', 60)


def home_url():
    return getattr(settings, 'SPACEAPI_HOME_URL', '/')


@rate_limit(key='ip', rate=f'{SPACEAPI_RATELIMIT_PER_MINUTE}/m', block=True)
def spaceapi(request, fragment=''):
    # Alles, was kein Lesezugriff ist, landet wie jede ungültige Anfrage auf der Startseite
    if request.method not in ('GET', 'HEAD'):
        logger.debug("SpaceAPI %s request redirected.", request.method)
        return HttpResponseRedirect(home_url())

    # Abschließende Slashes zählen nicht: '/spaceapi/v1//' meint '/spaceapi/v1'
    fragment = fragment.rstrip('/')

    outcome = dispatch(fragment, get_registry())
    if isinstance(outcome, PassThrough):
        raise Http404
    if isinstance(outcome, JsonDocument):
        return JsonResponse(outcome.payload, json_dumps_params={'ensure_ascii': False})
    return HttpResponseRedirect(home_url())


@staff_member_required
def settings_page(request):
    registry = get_registry()

    if request.method == 'POST':
        form = SpaceSettingsForm(registry, request.POST)
        if form.is_valid():
            form.save()
            logger.info("SpaceAPI settings saved by %s.", request.user)
            messages.success(request, _('Space API Settings saved!'))
            return redirect('spaceapi_settings')
    else:
        form = SpaceSettingsForm(registry)

    return render(request, 'spaceapi/settings.html', {
        **admin.site.each_context(request),
        'title': _('Space API Settings'),
        'form': form,
        'document_url': request.build_absolute_uri('/spaceapi/v1/index'),
    })
