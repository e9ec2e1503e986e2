"""
Testes para ValueObjectRegistry (cache flyweight)
"""
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

from geocoords.domain.value_objects.cartesian_coordinate import CartesianCoordinate
from geocoords.domain.value_objects.registry import ValueObjectRegistry
from geocoords.domain.value_objects.spheric_coordinate import SphericCoordinate


class TestValueObjectRegistry:
    """Testes da semântica de busca-ou-inserção"""

    def test_first_request_creates_instance(self):
        """Testa que o primeiro pedido cria e registra a instância"""
        registry = ValueObjectRegistry("test")
        created = object()

        assert registry.get_or_create((1.0, 2.0, 3.0), lambda: created) is created
        assert len(registry) == 1
        assert (1.0, 2.0, 3.0) in registry

    def test_second_request_is_a_cache_hit(self):
        """Testa que a factory não é chamada de novo para uma chave conhecida"""
        registry = ValueObjectRegistry("test")
        calls = []

        def factory():
            calls.append(1)
            return object()

        first = registry.get_or_create((1.0, 2.0, 3.0), factory)
        second = registry.get_or_create((1.0, 2.0, 3.0), factory)

        assert first is second
        assert len(calls) == 1

    def test_exact_keys_by_default(self):
        """Testa que sem casas decimais a chave é a tupla exata"""
        registry = ValueObjectRegistry("test")

        assert registry.key_for((1.00001, 2.0, 3.0)) == (1.00001, 2.0, 3.0)
        assert registry.get_or_create((1.0, 2.0, 3.0), object) is not registry.get_or_create(
            (1.00001, 2.0, 3.0), object
        )
        assert len(registry) == 2

    def test_rounded_keys(self):
        """Testa que com casas decimais valores próximos compartilham a chave"""
        registry = ValueObjectRegistry("test", decimal_places=3)

        assert registry.key_for((1.2341, 2.0, 3.0)) == (1.234, 2.0, 3.0)
        assert registry.get_or_create((1.2341, 2.0, 3.0), object) is registry.get_or_create(
            (1.2342, 2.0, 3.0), object
        )
        assert (1.2344, 2.0, 3.0) in registry
        assert (1.2346, 2.0, 3.0) not in registry

    def test_derived_first_write_wins(self):
        """Testa que o primeiro valor derivado memoizado vence"""
        registry = ValueObjectRegistry("test")
        first, second = object(), object()

        assert registry.derived("spheric_form", (1.0, 1.0, 1.0)) is None
        assert registry.remember("spheric_form", (1.0, 1.0, 1.0), first) is first
        assert registry.remember("spheric_form", (1.0, 1.0, 1.0), second) is first
        assert registry.derived("spheric_form", (1.0, 1.0, 1.0)) is first

    def test_derived_kinds_are_separate(self):
        """Testa que tipos diferentes de valor derivado não se misturam"""
        registry = ValueObjectRegistry("test")
        form, identity = object(), object()

        registry.remember("cartesian_form", (1.0, 1.0, 1.0), form)
        registry.remember("identity", (1.0, 1.0, 1.0), identity)

        assert registry.derived("cartesian_form", (1.0, 1.0, 1.0)) is form
        assert registry.derived("identity", (1.0, 1.0, 1.0)) is identity
        assert len(registry) == 0


class TestRegistryConcurrency:
    """Testes de que chamadas concorrentes nunca geram duas instâncias canônicas"""

    def test_concurrent_get_or_create_builds_once(self):
        """Testa 16 threads pedindo a mesma chave ao mesmo tempo"""
        registry = ValueObjectRegistry("test")
        barrier = threading.Barrier(16)
        calls = []

        def factory():
            calls.append(1)
            time.sleep(0.01)
            return object()

        def request():
            barrier.wait()
            return registry.get_or_create((5.0, 6.0, 7.0), factory)

        with ThreadPoolExecutor(max_workers=16) as executor:
            results = list(executor.map(lambda _: request(), range(16)))

        assert len(calls) == 1
        assert all(result is results[0] for result in results)

    def test_concurrent_factory_calls_share_instance(self):
        """Testa que CartesianCoordinate.of em várias threads retorna uma instância"""
        barrier = threading.Barrier(8)

        def request(_):
            barrier.wait()
            return CartesianCoordinate.of(31.25, -62.5, 125.0)

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(request, range(8)))

        assert len({id(result) for result in results}) == 1

    def test_concurrent_conversions_agree(self):
        """Testa que conversões em corrida retornam a mesma esférica"""
        cartesian = CartesianCoordinate.of(-14.5, 3.25, 0.125)
        barrier = threading.Barrier(8)

        def request(_):
            barrier.wait()
            return cartesian.as_spheric()

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(request, range(8)))

        assert all(result is results[0] for result in results)
        assert results[0].as_cartesian() == cartesian

    def test_concurrent_hashes_agree(self):
        """Testa que hashes calculados em corrida, nas duas variantes, são iguais"""
        spheric = SphericCoordinate.of(2.5, 1.25, 80.0)
        barrier = threading.Barrier(8)

        def request(index):
            barrier.wait()
            if index % 2:
                return hash(spheric)
            return hash(spheric.as_cartesian())

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(request, range(8)))

        assert len(set(results)) == 1

    def test_different_keys_are_all_registered(self):
        """Testa 200 chaves diferentes registradas em paralelo"""
        registry = ValueObjectRegistry("test")

        def request(index):
            return registry.get_or_create((float(index), 0.0, 0.0), object)

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(request, range(200)))

        assert len(registry) == 200
        assert len({id(result) for result in results}) == 200


class TestRoundingPolicy:
    """Testes de que o arredondamento vale para chaves e hashes juntos"""

    def test_rounded_registry_makes_close_values_equal(self):
        """Testa que com 3 casas decimais valores próximos são o mesmo valor"""
        with patch.object(CartesianCoordinate, "_registry", ValueObjectRegistry("cartesian", decimal_places=3)):
            first = CartesianCoordinate.of(1.2341, 2.0, 3.0)
            second = CartesianCoordinate.of(1.2342, 2.0, 3.0)

            assert first is second
            assert first == CartesianCoordinate(1.2343, 2.0, 3.0)
            assert hash(first) == hash(CartesianCoordinate(1.2343, 2.0, 3.0))

    def test_each_variant_has_its_own_registry(self):
        """Testa que cada variante tem o próprio registry"""
        assert CartesianCoordinate._registry is not SphericCoordinate._registry
        assert CartesianCoordinate._registry.name == "cartesian"
        assert SphericCoordinate._registry.name == "spheric"
