import pytest

from prodline.records import (
    AssemblySequence,
    Machine,
    Operator,
    Package,
    SupervisionConsole,
    TraceabilitySystem,
)


def test_machine_defaults():
    machine = Machine()
    assert (machine.id, machine.name, machine.kind, machine.status, machine.location) == (
        0,
        "Sin nombre",
        "Sin tipo",
        "Sin estado",
        "Sin ubicacion",
    )


def test_machine_str_is_name():
    machine = Machine(7, "Prensa A", "Prensa", "Activo", "Nave 1")
    assert str(machine) == "Prensa A"


def test_operator_defaults():
    operator = Operator()
    assert operator.name == "Sin nombre"
    assert operator.role == "Sin rol"
    assert operator.shift == "Sin turno"
    assert operator.location == "Sin ubicacion"
    assert operator.id == 0


def test_operator_str():
    operator = Operator(3, "Ana", "Tecnico", "Noche", "Linea 2")
    assert str(operator) == "ID: 3, Nombre: Ana, Rol: Tecnico, Turno: Noche, Ubicacion: Linea 2"


def test_package_holds_machine():
    machine = Machine(5, "Cortadora", "Corte", "Activo", "Nave 2")
    package = Package(1, 10.5, 4.0, 2.25, "Listo", "Caja", machine)
    assert package.machine is machine
    assert package.machine.id == 5
    assert (package.length, package.width, package.height) == (10.5, 4.0, 2.25)


def test_package_fields_are_mutable():
    package = Package()
    package.machine = Machine(id=9)
    package.status = "Enviado"
    assert package.machine.id == 9
    assert package.status == "Enviado"


def test_console_defaults_and_status_report(capsys):
    console = SupervisionConsole()
    assert console.status == "No Funcional"
    console.id = 4
    console.report_status()
    assert capsys.readouterr().out == "Consola 4 - Estado: No Funcional\n"


@pytest.mark.parametrize(
    "method, text",
    [
        ("start_sequence", "iniciando secuencia..."),
        ("pause_sequence", "pausando secuencia..."),
        ("assign_operation", "asignando operacion..."),
        ("monitor_performance", "supervisando rendimiento..."),
    ],
)
def test_console_actions_print(capsys, method, text):
    console = SupervisionConsole(2, "Funcional")
    getattr(console, method)()
    assert capsys.readouterr().out == f"Consola 2 {text}\n"


def test_sequence_defaults():
    sequence = AssemblySequence()
    assert sequence.start_time == "00:00:00"
    assert sequence.duration == 0
    assert sequence.status == "Pendiente"


def test_sequence_lifecycle(capsys):
    sequence = AssemblySequence(8, "08:00:00", 30, "Pendiente")
    sequence.start()
    assert sequence.status == "En Progreso"
    sequence.complete()
    assert sequence.status == "Completado"
    out = capsys.readouterr().out.splitlines()
    assert out == ["Secuencia 8 iniciada.", "Secuencia 8 completada."]


def test_sequence_summary_leaves_status(capsys):
    sequence = AssemblySequence(id=6)
    sequence.produce_analytic_summary()
    assert sequence.status == "Pendiente"
    assert "secuencia 6" in capsys.readouterr().out


def test_traceability_defaults():
    trace = TraceabilitySystem()
    assert trace.timestamp == "01/01/2022 00:00:00"
    assert trace.event_type == "Ninguno"
    assert trace.metric == 0.0


def test_traceability_store_data(capsys):
    trace = TraceabilitySystem()
    trace.store_data("Parada", 2.5)
    assert trace.event_type == "Parada"
    assert trace.metric == 2.5
    assert capsys.readouterr().out == "Datos almacenados: Evento=Parada, Metrica=2.5\n"


def test_traceability_query_and_report(capsys):
    trace = TraceabilitySystem(1, "02/02/2022 10:00:00", "Inicio", 1.0)
    trace.query_traces_by_period("lunes", "martes")
    trace.generate_efficiency_report()
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Consultando trazas desde lunes hasta martes"
    assert out[1] == "Generando informe de eficiencia..."
    assert trace.event_type == "Inicio"