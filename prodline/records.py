"""Records of the production line: machines, operators, packages and supervision."""

from __future__ import annotations

from dataclasses import dataclass

from .elements import _announce, _num


@dataclass
class Machine:
    """A machine on the production line."""

    id: int = 0
    name: str = "Sin nombre"
    kind: str = "Sin tipo"
    status: str = "Sin estado"
    location: str = "Sin ubicacion"

    def __str__(self) -> str:
        return self.name


@dataclass
class Operator:
    """A person who operates the line."""

    id: int = 0
    name: str = "Sin nombre"
    role: str = "Sin rol"
    shift: str = "Sin turno"
    location: str = "Sin ubicacion"

    def __str__(self) -> str:
        return (
            f"ID: {self.id}, Nombre: {self.name}, Rol: {self.role}, "
            f"Turno: {self.shift}, Ubicacion: {self.location}"
        )


@dataclass
class Package:
    """A package produced by a machine; dimensions are length, width and height."""

    id: int = 0
    length: float = 0.0
    width: float = 0.0
    height: float = 0.0
    status: str = ""
    kind: str = ""
    machine: Machine | None = None


@dataclass
class SupervisionConsole:
    """A console from which assembly sequences are supervised."""

    id: int = 0
    status: str = "No Funcional"

    def start_sequence(self) -> str:
        """Announce the start of a sequence and return the message."""
        return _announce(f"Consola {self.id} iniciando secuencia...")

    def pause_sequence(self) -> str:
        """Announce the pause of a sequence and return the message."""
        return _announce(f"Consola {self.id} pausando secuencia...")

    def assign_operation(self) -> str:
        """Announce the assignment of an operation and return the message."""
        return _announce(f"Consola {self.id} asignando operacion...")

    def monitor_performance(self) -> str:
        """Announce performance monitoring and return the message."""
        return _announce(f"Consola {self.id} supervisando rendimiento...")

    def report_status(self) -> str:
        """Print the console's current status and return the message."""
        return _announce(f"Consola {self.id} - Estado: {self.status}")


@dataclass
class AssemblySequence:
    """An assembly sequence with start time, duration and status."""

    id: int = 0
    start_time: str = "00:00:00"
    duration: int = 0
    status: str = "Pendiente"

    def start(self) -> None:
        """Mark the sequence as in progress."""
        self.status = "En Progreso"
        print(f"Secuencia {self.id} iniciada.")

    def complete(self) -> None:
        """Mark the sequence as completed."""
        self.status = "Completado"
        print(f"Secuencia {self.id} completada.")

    def produce_analytic_summary(self) -> str:
        """Announce the generation of an analytic summary and return the message."""
        return _announce(f"Generando resumen analitico para secuencia {self.id}")


@dataclass
class TraceabilitySystem:
    """A traceability record holding the last event and its metric."""

    id: int = 0
    timestamp: str = "01/01/2022 00:00:00"
    event_type: str = "Ninguno"
    metric: float = 0.0

    def store_data(self, event: str, metric: float) -> None:
        """Record an event together with its metric."""
        self.event_type = event
        self.metric = metric
        print(f"Datos almacenados: Evento={event}, Metrica={_num(metric)}")

    def query_traces_by_period(self, start: str, end: str) -> str:
        """Announce a query of traces between two moments and return the message."""
        return _announce(f"Consultando trazas desde {start} hasta {end}")

    def generate_efficiency_report(self) -> str:
        """Announce the generation of an efficiency report and return the message."""
        return _announce("Generando informe de eficiencia...")