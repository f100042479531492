from .schema import (
    ApiInfo,
    Contact,
    DocumentDescriptor,
    DocumentationType,
    VendorExtension,
)
from .assembler import DEFAULT_PROTOCOLS, HTTPS_ONLY_PROTOCOLS, DocumentAssembler
from .pageable import PAGEABLE_PARAMETERS, PageableParameter, pageable_parameters

__all__ = [
    'ApiInfo',
    'Contact',
    'DocumentDescriptor',
    'DocumentationType',
    'VendorExtension',
    'DEFAULT_PROTOCOLS',
    'HTTPS_ONLY_PROTOCOLS',
    'DocumentAssembler',
    'PAGEABLE_PARAMETERS',
    'PageableParameter',
    'pageable_parameters',
]
