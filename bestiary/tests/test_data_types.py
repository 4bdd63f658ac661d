"""
Entry projection and capability protocol tests.
"""

from bestiary import (
    BestiarySpeciesData, Color, Entry, Habitat, Id, Name, OwnedEntry, SeenEntry, Shape, Species, Status,
)


def test_entry_to_dict_none_status():
    assert Entry(status=Status.NONE).to_dict() == {'status': 'none'}


def test_entry_to_dict_seen_status():
    entry = Entry(status=Status.SEEN, seen_entry=SeenEntry(name="Drake"))
    assert entry.to_dict() == {'status': 'seen', 'seen': {'name': 'Drake'}}


def test_entry_to_dict_owned_status():
    entry = Entry(
        status=Status.OWNED,
        seen_entry=SeenEntry(name="Drake"),
        owned_entry=OwnedEntry("Reptile", "Fierce", 200, 15),
    )
    assert entry.to_dict() == {
        'status': 'owned',
        'seen': {'name': 'Drake'},
        'owned': {
            'category': 'Reptile',
            'description': 'Fierce',
            'weight_in_hectograms': 200,
            'height_in_decimeters': 15,
        },
    }


def test_species_satisfies_protocols():
    species = Species(5, "Drake", "Reptile", "Fierce", 200, 15,
                      Color(1, "Red"), Shape(1, "Quadruped"), Habitat(1, "Mountain"))

    assert isinstance(species, Id)
    assert isinstance(species, Name)
    assert isinstance(species, BestiarySpeciesData)
    for attribute in (species.color(), species.shape(), species.habitat()):
        assert isinstance(attribute, Name)


def test_attribute_names():
    assert Color(3, "Blue").name() == "Blue"
    assert Shape(4, "Winged").id() == 4
    assert Habitat(2, "Sea").name() == "Sea"


def test_package_exports_registry_types():
    import bestiary
    from bestiary.loader import DataLoadError

    assert bestiary.DataLoadError is DataLoadError
    assert "DataLoadError" in bestiary.__all__
    assert "BestiarySpecies" in bestiary.__all__
    assert isinstance(Species(1, "Imp", "Fiend", "Small", 40, 5,
                              Color(1, "Red"), Shape(1, "Biped"), Habitat(1, "Pit")),
                      bestiary.BestiarySpecies)
