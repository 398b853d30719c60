"""Static SpreadsheetML package parts and namespaces."""

from __future__ import annotations

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'

CONTENT_TYPES_NS = "http://schemas.openxmlformats.org/package/2006/content-types"
PACKAGE_RELATIONSHIPS_NS = "http://schemas.openxmlformats.org/package/2006/relationships"
SPREADSHEET_MAIN_NS = "http://schemas.openxmlformats.org/spreadsheetml/2006/main"
OFFICE_RELATIONSHIPS_NS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"

RELATIONSHIPS_CONTENT_TYPE = "application/vnd.openxmlformats-package.relationships+xml"
XML_CONTENT_TYPE = "application/xml"
WORKBOOK_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet.main+xml"
WORKSHEET_CONTENT_TYPE = (
    "application/vnd.openxmlformats-officedocument.spreadsheetml.worksheet+xml"
)
WORKSHEET_RELATIONSHIP_TYPE = f"{OFFICE_RELATIONSHIPS_NS}/worksheet"

CONTENT_TYPES_PART = "[Content_Types].xml"
ROOT_RELATIONSHIPS_PART = "_rels/.rels"
APP_PROPERTIES_PART = "docProps/app.xml"
CORE_PROPERTIES_PART = "docProps/core.xml"
WORKBOOK_PART = "xl/workbook.xml"
WORKBOOK_RELATIONSHIPS_PART = "xl/_rels/workbook.xml.rels"
WORKSHEET_PART_TEMPLATE = "xl/worksheets/sheet{number}.xml"

APPLICATION_NAME = "casemd"

ROOT_RELATIONSHIPS = (
    XML_DECLARATION
    + f'<Relationships xmlns="{PACKAGE_RELATIONSHIPS_NS}">\n'
    f'  <Relationship Id="rId1" Type="{OFFICE_RELATIONSHIPS_NS}/officeDocument" '
    f'Target="{WORKBOOK_PART}"/>\n'
    f'  <Relationship Id="rId2" Type="{PACKAGE_RELATIONSHIPS_NS}/metadata/core-properties" '
    f'Target="{CORE_PROPERTIES_PART}"/>\n'
    f'  <Relationship Id="rId3" Type="{OFFICE_RELATIONSHIPS_NS}/extended-properties" '
    f'Target="{APP_PROPERTIES_PART}"/>\n'
    "</Relationships>"
)

APP_PROPERTIES = (
    XML_DECLARATION
    + "<Properties "
    'xmlns="http://schemas.openxmlformats.org/officeDocument/2006/extended-properties" '
    'xmlns:vt="http://schemas.openxmlformats.org/officeDocument/2006/docPropsVTypes">\n'
    f"  <Application>{APPLICATION_NAME}</Application>\n"
    "</Properties>"
)

CORE_PROPERTIES = (
    XML_DECLARATION
    + "<cp:coreProperties "
    'xmlns:cp="http://schemas.openxmlformats.org/package/2006/metadata/core-properties" '
    'xmlns:dc="http://purl.org/dc/elements/1.1/" '
    'xmlns:dcterms="http://purl.org/dc/terms/" '
    'xmlns:dcmitype="http://purl.org/dc/dcmitype/" '
    'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">\n'
    f"  <dc:creator>{APPLICATION_NAME}</dc:creator>\n"
    f"  <cp:lastModifiedBy>{APPLICATION_NAME}</cp:lastModifiedBy>\n"
    "</cp:coreProperties>"
)
