"""Historical leap second seed data, see :class:`.ModuleDotDatLeapSecondLoader`."""
