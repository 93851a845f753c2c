"""Tests for NameAllocator and the process-wide allocator."""

from destructure.naming import NameAllocator, default_allocator, reset_module_state


class TestNameAllocator:
    def test_first_name_uses_zero(self):
        assert NameAllocator().allocate("var") == "var$0"

    def test_counter_increments(self):
        alloc = NameAllocator()
        assert [alloc.allocate("var") for _ in range(3)] == ["var$0", "var$1", "var$2"]

    def test_counter_shared_across_prefixes(self):
        alloc = NameAllocator()
        names = [alloc.allocate("arg"), alloc.allocate("var"), alloc.allocate("arg")]
        assert names == ["arg$0", "var$1", "arg$2"]
        assert len(set(names)) == 3

    def test_reset_restarts_numbering(self):
        alloc = NameAllocator()
        alloc.allocate("var")
        alloc.allocate("var")
        alloc.reset()
        assert alloc.counter == 0
        assert alloc.allocate("var") == "var$0"

    def test_allocators_are_independent(self):
        a, b = NameAllocator(), NameAllocator()
        a.allocate("var")
        assert b.allocate("var") == "var$0"


class TestModuleState:
    def test_default_allocator_is_shared(self):
        assert default_allocator() is default_allocator()

    def test_reset_module_state(self):
        default_allocator().allocate("var")
        reset_module_state()
        assert default_allocator().allocate("var") == "var$0"
