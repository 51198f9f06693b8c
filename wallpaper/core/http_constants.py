"""Constantes HTTP pour éviter les valeurs magiques dans le code.

Ce module définit les codes de statut HTTP utilisés par les routes de génération de jetons et de
rendu d'images.
"""

# Codes de statut HTTP courants
HTTP_OK = 200
HTTP_BAD_REQUEST = 400
HTTP_NOT_FOUND = 404
HTTP_INTERNAL_SERVER_ERROR = 500
HTTP_BAD_GATEWAY = 502

# En-têtes de réponse des images
PNG_MEDIA_TYPE = "image/png"
NO_STORE_CACHE_CONTROL = "no-store, max-age=0"
