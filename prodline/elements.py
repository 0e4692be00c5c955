"""Production-line elements: actuators, sensors and the robotic arm."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


def _num(value: float) -> str:
    """Render a number the way the line's console and reports show it."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    text = format(float(value), ".15g")
    return text.replace("e", "E")


def _announce(message: str) -> str:
    """Print a console message and hand it back to the caller."""
    print(message)
    return message


@dataclass
class Element(ABC):
    """Any controllable element of the production line."""

    id: int = 0
    status: str = "Inactivo"

    @abstractmethod
    def activate(self) -> None:
        """Switch the element on."""

    @abstractmethod
    def deactivate(self) -> None:
        """Switch the element off."""

    @abstractmethod
    def report_configuration(self) -> str:
        """Describe the element's current configuration."""


@dataclass
class Actuator(Element, ABC):
    """An element that acts on the line."""

    kind: str = ""

    def stop(self) -> str:
        """Announce an emergency stop of this actuator and return the alert."""
        return _announce(f"ALERTA: Elemtos {self.id} detenido!")


@dataclass
class Sensor(Element, ABC):
    """An element that measures; resolution in pixels, range in cm."""

    resolution: int = 0
    detection_range: int = 0

    @abstractmethod
    def calibrate(self) -> str:
        """Calibrate the sensor."""

    def activate(self) -> None:
        self.status = "Encendido"
        print(f"Sensor {self.id} activado.")

    def deactivate(self) -> None:
        self.status = "Apagado"
        print(f"Sensor {self.id} desactivado.")


@dataclass
class RoboticArm(Element):
    """A robotic arm with a 3D position, grip capacity (g) and speed (cm/s)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    grip_capacity: float = 0.0
    movement_speed: float = 0.0

    def activate(self) -> None:
        self.status = "Activo"
        print(f"Brazo Robotico {self.id} activado.")

    def deactivate(self) -> None:
        self.status = "Inactivo"
        print(f"Brazo Robotico {self.id} desactivado.")

    def report_configuration(self) -> str:
        return (
            f"Brazo {self.id}: Pos({_num(self.x)},{_num(self.y)},{_num(self.z)}), "
            f"Cap:{_num(self.grip_capacity)}g, Vel:{_num(self.movement_speed)}cm/s"
        )

    def position_at(self, x: float, y: float, z: float) -> None:
        """Move the arm to the given coordinates."""
        self.x, self.y, self.z = x, y, z
        print(f"Brazo {self.id} posicionado en ({_num(x)}, {_num(y)}, {_num(z)})")

    def rotate_end_effector(self, angle: float) -> str:
        """Rotate the end effector to the given angle in degrees."""
        return _announce(f"Brazo {self.id} rotado a {_num(angle)} grados")


@dataclass
class HydraulicCylinder(Actuator):
    """A hydraulic cylinder with push force (kN) and extension (mm)."""

    push_force: float = 0.0
    extension: float = 0.0

    def activate(self) -> None:
        self.status = "Activo"
        print(f"Cilindro Hidraulico {self.id} activado.")

    def deactivate(self) -> None:
        self.status = "Inactivo"
        print(f"Cilindro Hidraulico {self.id} desactivado.")

    def report_configuration(self) -> str:
        return (
            f"CilindroHidraulico {self.id}: Fuerza:{_num(self.push_force)}kN, "
            f"Extension:{_num(self.extension)}mm"
        )

    def extend(self, distance: float) -> None:
        """Extend the cylinder by the given distance."""
        self.extension += distance
        print(f"Cilindro {self.id} extendido {_num(distance)} mm")

    def retract(self, distance: float) -> None:
        """Retract the cylinder by the given distance."""
        self.extension -= distance
        print(f"Cilindro {self.id} retraido {_num(distance)} mm")

    def regulate_flow(self, percentage: float) -> str:
        """Set the hydraulic flow to a percentage."""
        return _announce(f"Cilindro {self.id} flujo regulado a {_num(percentage)}%")


@dataclass
class ForceSensor(Sensor):
    """A force sensor with sensitivity and currently applied force (N)."""

    sensitivity: float = 0.0
    applied_force: float = 0.0

    def calibrate(self) -> str:
        """Calibrate the sensor and return the console message."""
        return _announce(f"Sensor de Fuerza {self.id} calibrado.")

    def report_configuration(self) -> str:
        return (
            f"SensorFuerza {self.id}: Sens:{_num(self.sensitivity)}N, "
            f"Rango:{_num(self.detection_range)}N, Fuerza:{_num(self.applied_force)}N"
        )

    def measure_impact(self) -> float:
        """Return the force currently applied."""
        return self.applied_force

    def alert_overload(self) -> bool:
        """Warn when the applied force exceeds the range; return whether it does."""
        overloaded = self.applied_force > self.detection_range
        if overloaded:
            print(f"ALERTA: Sensor de Fuerza {self.id} en sobrecarga!")
        return overloaded


@dataclass
class VisionSensor(Sensor):
    """A vision sensor holding the last captured image."""

    captured_image: str = ""

    def calibrate(self) -> str:
        """Calibrate the sensor and return the console message."""
        return _announce(f"Sensor de Vision {self.id} calibrado.")

    def report_configuration(self) -> str:
        return (
            f"SensorVision {self.id}: Res:{_num(self.resolution)}, "
            f"Rango:{_num(self.detection_range)}cm, Imagen:{self.captured_image}"
        )

    def scan_component(self) -> str:
        """Scan the component in front of the sensor and return the console message."""
        return _announce(f"Sensor de Vision {self.id} escaneando componente.")

    def report_defects(self) -> str:
        """Report defects found in the last scan."""
        return "No se encontraron defectos"