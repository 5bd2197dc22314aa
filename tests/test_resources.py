from gatherquest.entities import PlayerEntity, ResourceEntity, World
from gatherquest.resources import gather_resources, handle_resource_click
from gatherquest.types import (
    Gatherable,
    Player,
    PlayerInventory,
    ResourceType,
    Timer,
    Transform,
    Vec3,
)


def _node(kind, x, y, z):
    location = Vec3(x, y, z)
    return ResourceEntity(Gatherable(kind), location, Transform(location))


def _world(*nodes, ready=True):
    timer = Timer(1.0, elapsed=1.0, finished=True) if ready else Timer(1.0)
    player = PlayerEntity(
        player=Player(5.0, 2.0, timer),
        transform=Transform(Vec3.ZERO),
        position=Vec3.ZERO,
    )
    return World(player=player, resources=list(nodes))


def test_gather_facing_resource(capsys):
    node = _node(ResourceType.WOOD, 0.0, 0.0, -1.0)
    world = _world(node)
    inventory = PlayerInventory()
    result = gather_resources(world, inventory, 0.1, True)
    assert result == (ResourceType.WOOD, 1)
    assert inventory.count(ResourceType.WOOD) == 1
    assert world.resources == []
    assert world.player.player.gathering_cooldown.finished is False
    assert "Gathered Wood! Total: 1" in capsys.readouterr().out


def test_gather_requires_key_press():
    world = _world(_node(ResourceType.WOOD, 0.0, 0.0, -1.0))
    inventory = PlayerInventory()
    assert gather_resources(world, inventory, 0.1, False) is None
    assert len(world.resources) == 1
    assert inventory.count(ResourceType.WOOD) == 0


def test_gather_ignores_resource_behind():
    world = _world(_node(ResourceType.WOOD, 0.0, 0.0, 1.0))
    inventory = PlayerInventory()
    assert gather_resources(world, inventory, 0.1, True) is None
    assert len(world.resources) == 1


def test_gather_ignores_out_of_range():
    world = _world(_node(ResourceType.STONE, 0.0, 0.0, -3.0))
    inventory = PlayerInventory()
    assert gather_resources(world, inventory, 0.1, True) is None
    assert inventory.count(ResourceType.STONE) == 0


def test_cooldown_ticks_instead_of_gathering():
    world = _world(_node(ResourceType.WOOD, 0.0, 0.0, -1.0), ready=False)
    inventory = PlayerInventory()
    assert gather_resources(world, inventory, 0.4, True) is None
    assert world.player.player.gathering_cooldown.elapsed == 0.4
    assert len(world.resources) == 1
    assert gather_resources(world, inventory, 1.0, True) is None
    assert world.player.player.gathering_cooldown.finished is True
    assert gather_resources(world, inventory, 0.1, True) == (ResourceType.WOOD, 1)


def test_gather_picks_closest():
    far = _node(ResourceType.STONE, 0.0, 0.0, -1.8)
    near = _node(ResourceType.WOOD, 0.0, 0.0, -0.5)
    world = _world(far, near)
    inventory = PlayerInventory()
    assert gather_resources(world, inventory, 0.1, True) == (ResourceType.WOOD, 1)
    assert world.resources == [far]


def test_gather_full_stack_keeps_node():
    node = _node(ResourceType.WOOD, 0.0, 0.0, -1.0)
    world = _world(node)
    inventory = PlayerInventory({ResourceType.WOOD: 10}, max_stack_size=10)
    assert gather_resources(world, inventory, 0.1, True) is None
    assert world.resources == [node]
    assert inventory.count(ResourceType.WOOD) == 10
    assert world.player.player.gathering_cooldown.finished is True


def test_click_requires_click():
    world = _world(_node(ResourceType.WOOD, 0.0, 0.0, 1.0))
    inventory = PlayerInventory()
    assert handle_resource_click(world, inventory, False) is None
    assert len(world.resources) == 1


def test_click_ignores_facing_and_cooldown():
    node = _node(ResourceType.STONE, 0.0, 0.0, 1.0)
    world = _world(node, ready=False)
    inventory = PlayerInventory()
    assert handle_resource_click(world, inventory, True) == (ResourceType.STONE, 1)
    assert world.resources == []
    assert world.player.player.gathering_cooldown.finished is False


def test_click_picks_closest_in_range():
    out = _node(ResourceType.ORE, 3.0, 0.0, 0.0)
    far = _node(ResourceType.WOOD, 0.0, 0.0, 1.5)
    near = _node(ResourceType.STONE, 1.0, 0.0, 0.0)
    world = _world(out, far, near)
    inventory = PlayerInventory()
    assert handle_resource_click(world, inventory, True) == (ResourceType.STONE, 1)
    assert world.resources == [out, far]


def test_click_full_stack():
    node = _node(ResourceType.ORE, 1.0, 0.0, 0.0)
    world = _world(node)
    inventory = PlayerInventory({ResourceType.ORE: 2}, max_stack_size=2)
    assert handle_resource_click(world, inventory, True) is None
    assert world.resources == [node]
    assert inventory.count(ResourceType.ORE) == 2