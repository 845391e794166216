"""Interface segregation: small device interfaces instead of one fat one."""
from abc import ABC, abstractmethod
from typing import List

from src.domain.base.entity import Record


class Document(Record):
    name: str
    content: str = ""


class Printer(ABC):

    @abstractmethod
    def print_document(self, document: Document) -> str:
        pass


class Scanner(ABC):

    @abstractmethod
    def scan(self, document: Document) -> str:
        pass


class Fax(ABC):

    @abstractmethod
    def fax(self, document: Document) -> str:
        pass


class OldFashionedPrinter(Printer):
    """Only prints; it is never asked to scan or fax."""

    def print_document(self, document: Document) -> str:
        return f"Printing {document.name}"


class Photocopier(Printer, Scanner):

    def print_document(self, document: Document) -> str:
        return f"Printing {document.name}"

    def scan(self, document: Document) -> str:
        return f"Scanning {document.name}"


class MultiFunctionDevice(Printer, Scanner, Fax):
    """Everything at once, for devices that really do it all."""

    def print_document(self, document: Document) -> str:
        return f"Printing {document.name}"

    def scan(self, document: Document) -> str:
        return f"Scanning {document.name}"

    def fax(self, document: Document) -> str:
        return f"Faxing {document.name}"


class MultiFunctionMachine(Printer, Scanner):
    """Printer and scanner assembled from separate parts by delegation."""

    def __init__(self, printer: Printer, scanner: Scanner):
        self.printer = printer
        self.scanner = scanner

    def print_document(self, document: Document) -> str:
        return self.printer.print_document(document)

    def scan(self, document: Document) -> str:
        return self.scanner.scan(document)


def capabilities(device: object) -> List[str]:
    """Names of the device interfaces an object implements."""
    return [
        iface.__name__ for iface in (Printer, Scanner, Fax) if isinstance(device, iface)
    ]
