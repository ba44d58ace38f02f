# topmark:header:start
#
#   project      : TypeSniff
#   file         : services.py
#   file_relpath : src/typesniff/types/builtins/services.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OGC web services (capabilities documents).

Exports:
    TYPES: WFS 2.0, WFS 1.1, WMS 1.3, WMS 1.1, WMTS 1.0 and CSW 2.0.2 service
        types. Each declares a URI shape (``SERVICE=...`` query parameter) and a
        default GetCapabilities query merged into remote URIs before sniffing.
"""

from __future__ import annotations

from typesniff.types.base import TestObjectType

_OWS_TITLE = (
    "string(/*/*[local-name() = 'ServiceIdentification']/*[local-name() = 'Title'])"
)
_OWS_ABSTRACT = (
    "string(/*/*[local-name() = 'ServiceIdentification']/*[local-name() = 'Abstract'])"
)

TYPES: list[TestObjectType] = [
    TestObjectType(
        id="wfs-2.0",
        label="OGC Web Feature Service 2.0",
        description="A web service implementing OGC WFS 2.0",
        detection_expression=(
            "boolean(/*[local-name() = 'WFS_Capabilities' and "
            "namespace-uri() = 'http://www.opengis.net/wfs/2.0' and "
            "starts-with(@version, '2.0')])"
        ),
        priority=300,
        label_expression=_OWS_TITLE,
        description_expression=_OWS_ABSTRACT,
        uri_detection_expression=r"(?i)[?&]service=wfs(&|$)",
        default_query="SERVICE=WFS&REQUEST=GetCapabilities&VERSION=2.0.0",
        parent="web-service",
        mime_types=("application/xml", "text/xml"),
    ),
    TestObjectType(
        id="wfs-1.1",
        label="OGC Web Feature Service 1.1",
        description="A web service implementing OGC WFS 1.1",
        detection_expression=(
            "boolean(/*[local-name() = 'WFS_Capabilities' and "
            "namespace-uri() = 'http://www.opengis.net/wfs' and "
            "@version = '1.1.0'])"
        ),
        priority=290,
        label_expression=_OWS_TITLE,
        description_expression=_OWS_ABSTRACT,
        uri_detection_expression=r"(?i)[?&]service=wfs(&|$)",
        default_query="SERVICE=WFS&REQUEST=GetCapabilities&VERSION=1.1.0",
        parent="web-service",
        mime_types=("application/xml", "text/xml"),
    ),
    TestObjectType(
        id="wms-1.3",
        label="OGC Web Map Service 1.3",
        description="A web service implementing OGC WMS 1.3.0",
        detection_expression=(
            "boolean(/*[local-name() = 'WMS_Capabilities' and @version = '1.3.0'])"
        ),
        priority=280,
        label_expression="string(/*/*[local-name() = 'Service']/*[local-name() = 'Title'])",
        description_expression=(
            "string(/*/*[local-name() = 'Service']/*[local-name() = 'Abstract'])"
        ),
        uri_detection_expression=r"(?i)[?&]service=wms(&|$)",
        default_query="SERVICE=WMS&REQUEST=GetCapabilities&VERSION=1.3.0",
        parent="web-service",
        mime_types=("application/xml", "text/xml"),
    ),
    TestObjectType(
        id="wms-1.1",
        label="OGC Web Map Service 1.1",
        description="A web service implementing OGC WMS 1.1.1",
        detection_expression="boolean(/*[local-name() = 'WMT_MS_Capabilities'])",
        priority=270,
        label_expression="string(/*/*[local-name() = 'Service']/*[local-name() = 'Title'])",
        uri_detection_expression=r"(?i)[?&]service=wms(&|$)",
        default_query="SERVICE=WMS&REQUEST=GetCapabilities&VERSION=1.1.1",
        parent="web-service",
        mime_types=("application/vnd.ogc.wms_xml",),
    ),
    TestObjectType(
        id="wmts-1.0",
        label="OGC Web Map Tile Service 1.0",
        description="A web service implementing OGC WMTS 1.0",
        detection_expression=(
            "boolean(/*[local-name() = 'Capabilities' and "
            "namespace-uri() = 'http://www.opengis.net/wmts/1.0'])"
        ),
        priority=260,
        label_expression=_OWS_TITLE,
        description_expression=_OWS_ABSTRACT,
        uri_detection_expression=r"(?i)([?&]service=wmts(&|$)|/wmts(/|$))",
        default_query="SERVICE=WMTS&REQUEST=GetCapabilities",
        parent="web-service",
        mime_types=("application/xml", "text/xml"),
    ),
    TestObjectType(
        id="csw-2.0.2",
        label="OGC Catalogue Service 2.0.2",
        description="A catalogue service implementing OGC CSW 2.0.2",
        detection_expression=(
            "boolean(/*[local-name() = 'Capabilities' and "
            "namespace-uri() = 'http://www.opengis.net/cat/csw/2.0.2'])"
        ),
        priority=250,
        label_expression=_OWS_TITLE,
        description_expression=_OWS_ABSTRACT,
        uri_detection_expression=r"(?i)[?&]service=csw(&|$)",
        default_query="SERVICE=CSW&REQUEST=GetCapabilities&VERSION=2.0.2",
        parent="web-service",
        mime_types=("application/xml", "text/xml"),
    ),
]
