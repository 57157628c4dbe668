"""
Dependency Injection Container.

Este módulo proporciona el contenedor de inyección de dependencias
que gestiona el lector de datos, los servicios de dominio y los
casos de uso.

Clean Architecture: Este contenedor vive en la capa más externa y es el único
lugar donde se crean dependencias concretas.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

# Domain
from adpulse.domain.repositories.data_reader import IDataReader
from adpulse.domain.services.revenue_calculator import RevenueCalculator

# Shared
from adpulse.shared.config.settings import Settings

if TYPE_CHECKING:
    from adpulse.infrastructure.persistence.database import DatabaseManager


@dataclass
class Container:
    """
    Contenedor de Inyección de Dependencias.

    Gestiona el ciclo de vida de las dependencias de la aplicación.
    Las capas internas dependen de abstracciones (IDataReader),
    no de implementaciones concretas.
    """

    # Configuración
    settings: Settings = field(default_factory=Settings)

    # Ports (implementaciones concretas)
    _data_reader: Optional[IDataReader] = None

    # Domain Services (stateless, se pueden compartir)
    _revenue_calculator: Optional[RevenueCalculator] = None

    # Pool async (se crea solo con db_enabled)
    _db_manager: Optional["DatabaseManager"] = None

    # ==================== Domain Services ====================

    @property
    def revenue_calculator(self) -> RevenueCalculator:
        """Obtiene o crea RevenueCalculator (singleton)."""
        if self._revenue_calculator is None:
            self._revenue_calculator = RevenueCalculator()
        return self._revenue_calculator

    # ==================== Infrastructure ====================

    @property
    def db_manager(self) -> "DatabaseManager":
        """DatabaseManager de este contenedor (solo si db_enabled)."""
        if self._db_manager is None:
            from adpulse.infrastructure.persistence.database import DatabaseManager
            self._db_manager = DatabaseManager(self.settings)
        return self._db_manager

    @property
    def data_reader(self) -> IDataReader:
        """
        Obtiene el lector de datos.

        db_enabled=True  → SqlDataReader sobre el pool async
        db_enabled=False → InMemoryDataReader vacío
        """
        if self._data_reader is None:
            if self.settings.db_enabled:
                # Import aquí para no cargar SQLAlchemy en modo memoria
                from adpulse.infrastructure.persistence.repositories.sql_data_reader import SqlDataReader
                self._data_reader = SqlDataReader(self.db_manager.session)
            else:
                from adpulse.infrastructure.memory.in_memory_reader import InMemoryDataReader
                self._data_reader = InMemoryDataReader()
        return self._data_reader

    # ==================== Use Cases ====================

    def get_analytics_usecase(self):
        """
        Factory para AnalyticsQueryService.

        Cada llamada crea una nueva instancia para evitar estado compartido.
        """
        from adpulse.application.use_cases.analytics_usecase import AnalyticsQueryService
        return AnalyticsQueryService(
            data_reader=self.data_reader,
            calculator=self.revenue_calculator,
        )

    # ==================== Lifecycle ====================

    def reset(self) -> None:
        """
        Resetea las instancias perezosas (útil para tests).

        El DatabaseManager se conserva: su pool lo cierra el lifespan.
        """
        self._data_reader = None
        self._revenue_calculator = None

    def override(self, name: str, instance: Any) -> None:
        """
        Override una dependencia (útil para tests con fakes).

        Args:
            name: Nombre de la dependencia (ej: 'data_reader')
            instance: Instancia a usar
        """
        attr_name = f"_{name}"
        if hasattr(self, attr_name):
            setattr(self, attr_name, instance)
        else:
            raise ValueError(f"Unknown dependency: {name}")


# ==================== Global Container ====================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Obtiene la instancia global del contenedor.

    Patrón Singleton para asegurar una única instancia
    compartida en toda la aplicación.
    """
    global _container
    if _container is None:
        _container = Container()
    return _container


def reset_container() -> None:
    """Resetea el contenedor global."""
    global _container
    if _container is not None:
        _container.reset()
    _container = None


def init_container(settings: Optional[Settings] = None) -> Container:
    """
    Inicializa el contenedor con configuración específica.

    Args:
        settings: Configuración opcional. Si es None, usa valores por defecto.

    Returns:
        Container inicializado
    """
    global _container
    if settings is None:
        settings = Settings()
    _container = Container(settings=settings)
    return _container


# ==================== Testing Utilities ====================

class TestContainer(Container):
    """
    Contenedor especializado para tests.

    Permite inyectar fakes sin modificar el contenedor de producción.
    """

    __test__ = False  # pytest no debe recolectarlo

    def __init__(self, settings: Optional[Settings] = None, **mocks):
        """
        Args:
            settings: Settings opcionales (db_enabled=False por defecto)
            **mocks: Dependencias a inyectar (ej: data_reader=fake_reader)
        """
        super().__init__(settings=settings or Settings(db_enabled=False))
        for name, mock in mocks.items():
            self.override(name, mock)

    @classmethod
    def with_mocks(cls, **mocks) -> "TestContainer":
        """Factory method para crear contenedor con mocks."""
        return cls(**mocks)


def create_test_container(**mocks) -> TestContainer:
    """
    Crea un contenedor de pruebas con dependencias inyectadas.

    Ejemplo:
        container = create_test_container(
            data_reader=InMemoryDataReader.from_dicts(regions=[...]),
        )
    """
    return TestContainer.with_mocks(**mocks)
