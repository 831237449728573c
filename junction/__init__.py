"""
junction: simulation core
=========================

Modules
-------
world
    :class:`World` simulation context and per-tick loop.
signal_controller
    :class:`SignalController` density-driven GREEN / YELLOW state machine.
occupancy
    :class:`SlotOccupancy` slot reservation and nearest-first car-following.
vehicle
    :class:`Vehicle` entity and its speed model.
spawner
    :class:`Spawner` rate-limited admission onto free tail slots.
geometry
    :class:`Layout` stop lines, lane centres and slot positions.
traffic_policy
    :class:`SimulationPolicy` tunable constants and timing helpers.
metrics
    :class:`SimMetrics` counter snapshot.
sim_bridge
    :class:`SimBridge` frame-driven host adapter.
physics
    Low-level kinematics helpers.
"""
