"""Adapter: convert one interface into another."""

from abc import ABC, abstractmethod


class XmlDataSource:
    """Existing XML source that cannot be modified."""

    def get_xml_data(self) -> str:
        return "<data>Hello</data>"


def _xml_to_json(xml: str) -> str:
    return xml.replace("<data>", '{"data":"').replace("</data>", '"}')


def before() -> None:
    source = XmlDataSource()
    # Client needs JSON, so it converts by hand at every call site
    raw_xml = source.get_xml_data()
    manual_json = _xml_to_json(raw_xml)
    print(f"AdapterBefore: manual conversion => {manual_json}")


class JsonDataSource(ABC):
    """Interface the client expects."""

    @abstractmethod
    def get_json_data(self) -> str:
        ...


class XmlToJsonAdapter(JsonDataSource):
    """Wraps the XML source and exposes it as JSON."""

    def __init__(self, xml_source: XmlDataSource):
        self._xml_source = xml_source

    def get_json_data(self) -> str:
        return _xml_to_json(self._xml_source.get_xml_data())


def after() -> None:
    source: JsonDataSource = XmlToJsonAdapter(XmlDataSource())
    print(f"AdapterAfter: {source.get_json_data()}")
