"""Known cube block fields, in the order they are written back to a document.

Text fields with nested markup (toolbars, stockpiles, waypoint lists) keep
that markup verbatim. Fields absent from this table are kept in each block's
unmapped bag.
"""
from __future__ import annotations

from sebp.domain.registry import FieldRegistry, FieldSpec

BLOCK_FIELDS: tuple[FieldSpec, ...] = (
    # Identity and common block state
    FieldSpec("SubtypeName", "text"),
    FieldSpec("EntityId", "text"),
    FieldSpec("Min", "vector3_int"),
    FieldSpec("BlockOrientation", "block_orientation"),
    FieldSpec("ColorMaskHSV", "vector3"),
    FieldSpec("SkinSubtypeId", "text"),
    FieldSpec("BuiltBy", "text"),
    FieldSpec("Owner", "text"),
    FieldSpec("ShareMode", "text"),
    FieldSpec("ComponentContainer", "component_container"),
    FieldSpec("CustomName", "text"),
    FieldSpec("ShowOnHUD", "boolean", default=False),
    FieldSpec("ShowInTerminal", "boolean", default=False),
    FieldSpec("ShowInToolbarConfig", "boolean", default=False),
    FieldSpec("ShowInInventory", "boolean", default=False),
    FieldSpec("NumberInGrid", "integer"),
    FieldSpec("Enabled", "boolean", default=False),

    # Landing gear and magnetic plates
    FieldSpec("IsLocked", "text"),
    FieldSpec("BrakeForce", "text"),
    FieldSpec("AutoLock", "text"),
    FieldSpec("FirstLockAttempt", "text"),
    FieldSpec("LockSound", "text"),
    FieldSpec("UnlockSound", "text"),
    FieldSpec("FailedAttachSound", "text"),
    FieldSpec("AttachedEntityId", "text"),
    FieldSpec("MasterToSlave", "text"),
    FieldSpec("GearPivotPosition", "text"),
    FieldSpec("OtherPivot", "text"),
    FieldSpec("LockMode", "text"),
    FieldSpec("IsParkingEnabled", "text"),

    # Survival kits and assemblers
    FieldSpec("CurrentProgress", "text"),
    FieldSpec("DisassembleEnabled", "text"),
    FieldSpec("RepeatAssembleEnabled", "text"),
    FieldSpec("RepeatDisassembleEnabled", "text"),
    FieldSpec("SlaveEnabled", "text"),
    FieldSpec("SpawnName", "text"),

    # Gas tanks
    FieldSpec("IsStockpiling", "text"),
    FieldSpec("FilledRatio", "text"),
    FieldSpec("AutoRefill", "text"),

    # Batteries
    FieldSpec("CurrentStoredPower", "text"),
    FieldSpec("ProducerEnabled", "text"),
    FieldSpec("MaxStoredPower", "text"),
    FieldSpec("SemiautoEnabled", "text"),
    FieldSpec("OnlyDischargeEnabled", "text"),
    FieldSpec("ChargeMode", "text"),

    # Antennas and beacons
    FieldSpec("BroadcastRadius", "text"),
    FieldSpec("ShowShipName", "text"),
    FieldSpec("EnableBroadcasting", "text"),
    FieldSpec("AttachedPB", "text"),
    FieldSpec("IgnoreAllied", "text"),
    FieldSpec("IgnoreOther", "text"),
    FieldSpec("HudText", "text"),

    # Weapons and tools
    FieldSpec("IsShooting", "text"),
    FieldSpec("IsShootingFromTerminal", "text"),
    FieldSpec("IsLargeTurret", "text"),
    FieldSpec("MinFov", "text"),
    FieldSpec("MaxFov", "text"),
    FieldSpec("UseConveyorSystem", "text"),
    FieldSpec("GunBase", "text"),
    FieldSpec("Toolbar", "text"),
    FieldSpec("SelectedGunId", "text"),
    FieldSpec("BuildToolbar", "text"),
    FieldSpec("OnLockedToolbar", "text"),
    FieldSpec("IsTargetLockingEnabled", "text"),

    # Remote control and autopilot
    FieldSpec("PreviousControlledEntityId", "text"),
    FieldSpec("AutoPilotEnabled", "text"),
    FieldSpec("FlightMode", "text"),
    FieldSpec("BindedCamera", "text"),
    FieldSpec("CurrentWaypointIndex", "text"),
    FieldSpec("Waypoints", "text"),
    FieldSpec("Direction", "text"),
    FieldSpec("DockingModeEnabled", "text"),
    FieldSpec("CollisionAvoidance", "text"),
    FieldSpec("Coords", "text"),
    FieldSpec("Names", "text"),
    FieldSpec("WaypointThresholdDistance", "text"),
    FieldSpec("IsMainRemoteControl", "text"),
    FieldSpec("WaitForFreeWay", "text"),
    FieldSpec("IsUpdatedSave", "text"),

    # Cockpits and seats
    FieldSpec("IntegrityPercent", "text"),
    FieldSpec("BuildPercent", "text"),
    FieldSpec("PilotRelativeWorld", "text"),
    FieldSpec("PilotGunDefinition", "text"),
    FieldSpec("IsInFirstPersonView", "text"),
    FieldSpec("OxygenLevel", "text"),
    FieldSpec("PilotJetpackEnabled", "text"),
    FieldSpec("TargetData", "text"),
    FieldSpec("SitAnimation", "text"),

    # Connectors
    FieldSpec("DeformationRatio", "text"),
    FieldSpec("MasterToSlaveTransform", "text"),
    FieldSpec("MasterToSlaveGrid", "text"),
    FieldSpec("IsMaster", "text"),
    FieldSpec("TradingEnabled", "text"),
    FieldSpec("AutoUnlockTime", "text"),
    FieldSpec("TimeOfConnection", "text"),
    FieldSpec("IsPowerTransferOverrideEnabled", "text"),
    FieldSpec("IsApproaching", "text"),
    FieldSpec("IsConnecting", "text"),

    # Lights and rotating lights
    FieldSpec("Radius", "text"),
    FieldSpec("ReflectorRadius", "text"),
    FieldSpec("Falloff", "text"),
    FieldSpec("Intensity", "text"),
    FieldSpec("BlinkIntervalSeconds", "text"),
    FieldSpec("BlinkLenght", "text"),
    FieldSpec("BlinkOffset", "text"),
    FieldSpec("Offset", "text"),
    FieldSpec("RotationSpeed", "text"),

    # Cameras, parachutes and weapon modes
    FieldSpec("Capacity", "text"),
    FieldSpec("UseSingleWeaponMode", "text"),
    FieldSpec("IsActive", "text"),
    FieldSpec("FoV", "text"),

    # Build state, colors and turret aim
    FieldSpec("ConstructionStockpile", "text"),
    FieldSpec("ColorRed", "float"),
    FieldSpec("ColorGreen", "float"),
    FieldSpec("ColorBlue", "float"),
    FieldSpec("IsDepressurizing", "boolean"),
    FieldSpec("Range", "float"),
    FieldSpec("RemainingAmmo", "integer"),
    FieldSpec("Target", "integer"),
    FieldSpec("IsPotentialTarget", "boolean"),
    FieldSpec("Rotation", "float"),
    FieldSpec("Elevation", "float"),
    FieldSpec("EnableIdleRotation", "boolean"),
    FieldSpec("PreviousIdleRotationState", "boolean"),
    FieldSpec("TargetCharacters", "boolean"),
    FieldSpec("TargetingGroup", "text"),
    FieldSpec("Flags", "text"),
    FieldSpec("HorizonIndicatorEnabled", "boolean"),

    # Ownership, kits and wardrobes
    FieldSpec("SteamId", "text"),
    FieldSpec("SerialId", "text"),
    FieldSpec("SteamUserId", "text"),
    FieldSpec("IdleSound", "text"),
    FieldSpec("ProgressSound", "text"),
    FieldSpec("TakeOwnership", "boolean"),
    FieldSpec("SetFaction", "boolean"),
    FieldSpec("WardrobeUserId", "text"),

    # Event controllers and timers
    FieldSpec("Threshold", "float"),
    FieldSpec("ANDGate", "boolean"),
    FieldSpec("SelectedEvent", "integer"),
    FieldSpec("SelectedBlocks", "text"),
    FieldSpec("ConditionInvert", "boolean"),
    FieldSpec("Delay", "integer"),
    FieldSpec("CurrentTime", "integer"),
    FieldSpec("IsCountingDown", "boolean"),
    FieldSpec("Silent", "boolean"),

    # Ore detectors and jump drives
    FieldSpec("DetectionRadius", "integer"),
    FieldSpec("BroadcastUsingAntennas", "boolean"),
    FieldSpec("IsSurvivalModeForced", "boolean"),
    FieldSpec("StoredPower", "float"),
    FieldSpec("JumpTarget", "text"),
    FieldSpec("JumpRatio", "float"),
    FieldSpec("Recharging", "boolean"),
    FieldSpec("SelectedBeaconName", "text"),
    FieldSpec("SelectedBeaconId", "integer"),

    # Mechanical connections (rotors, pistons, hinges)
    FieldSpec("TopBlockId", "text"),
    FieldSpec("ShareInertiaTensor", "boolean"),
    FieldSpec("SafetyDetach", "integer"),
    FieldSpec("RotorEntityId", "text"),
    FieldSpec("WeldedEntityId", "text"),
    FieldSpec("TargetVelocity", "float"),
    FieldSpec("MinAngle", "float"),
    FieldSpec("MaxAngle", "float"),
    FieldSpec("CurrentAngle", "float"),
    FieldSpec("LimitsActive", "boolean"),
    FieldSpec("RotorLock", "boolean"),
    FieldSpec("Torque", "float"),
    FieldSpec("BrakingTorque", "float"),

    # Button panels and doors
    FieldSpec("AnyoneCanUse", "boolean"),
    FieldSpec("CustomButtonNames", "text"),
    FieldSpec("Opening", "float"),
    FieldSpec("OpenSound", "text"),
    FieldSpec("CloseSound", "text"),

    # Turret controllers and gravity generators
    FieldSpec("TargetPriority", "text"),
    FieldSpec("UpdateTargetInterval", "integer"),
    FieldSpec("SelectedAttackPattern", "integer"),
    FieldSpec("CanTargetCharacters", "boolean"),
    FieldSpec("GravityAcceleration", "float"),
    FieldSpec("FieldSize", "text"),

    # Text panels and LCD surfaces
    FieldSpec("Description", "text"),
    FieldSpec("Title", "text"),
    FieldSpec("AccessFlag", "text"),
    FieldSpec("ChangeInterval", "integer"),
    FieldSpec("Font", "text"),
    FieldSpec("FontSize", "float"),
    FieldSpec("PublicDescription", "text"),
    FieldSpec("PublicTitle", "text"),
    FieldSpec("ShowText", "text"),
    FieldSpec("FontColor", "text"),
    FieldSpec("BackgroundColor", "text"),
    FieldSpec("CurrentShownTexture", "integer"),
    FieldSpec("TextPadding", "integer"),
    FieldSpec("Version", "integer"),
    FieldSpec("ScriptBackgroundColor", "text"),
    FieldSpec("ScriptForegroundColor", "text"),
    FieldSpec("Sprites", "integer"),
    FieldSpec("SelectedRotationIndex", "text"),

    # Sound blocks
    FieldSpec("TargetLocking", "boolean"),
    FieldSpec("Volume", "float"),
    FieldSpec("CueName", "text"),
    FieldSpec("LoopPeriod", "float"),
    FieldSpec("IsPlaying", "boolean"),
    FieldSpec("ElapsedSoundSeconds", "float"),
    FieldSpec("IsLoopableSound", "boolean"),

    # Jukeboxes, parachutes and sensors
    FieldSpec("IsMainCockpit", "boolean"),
    FieldSpec("NextItemId", "integer"),
    FieldSpec("SelectedSounds", "text"),
    FieldSpec("IsJukeboxPlaying", "boolean"),
    FieldSpec("CurrentSound", "integer"),
    FieldSpec("TargetAngularVelocity", "text"),
    FieldSpec("State", "boolean"),
    FieldSpec("FieldMin", "text"),
    FieldSpec("FieldMax", "text"),
    FieldSpec("PlaySound", "boolean"),
    FieldSpec("DetectPlayers", "boolean"),
    FieldSpec("DetectFloatingObjects", "boolean"),
    FieldSpec("DetectSmallShips", "boolean"),
    FieldSpec("DetectLargeShips", "boolean"),
    FieldSpec("DetectStations", "boolean"),
    FieldSpec("DetectSubgrids", "boolean"),
    FieldSpec("DetectAsteroids", "boolean"),
    FieldSpec("DetectOwner", "boolean"),
    FieldSpec("DetectFriendly", "boolean"),
    FieldSpec("DetectNeutral", "boolean"),
    FieldSpec("DetectEnemy", "boolean"),

    # Safe zones and gyroscopes
    FieldSpec("SafeZoneId", "text"),
    FieldSpec("ConnectedEntityId", "text"),
    FieldSpec("Strength", "float"),
    FieldSpec("GyroPower", "float"),

    # Projectors
    FieldSpec("ProjectedGrids", "text"),
    FieldSpec("ProjectionOffset", "text"),
    FieldSpec("ProjectionRotation", "text"),
    FieldSpec("KeepProjection", "boolean"),
    FieldSpec("ShowOnlyBuildable", "boolean"),
    FieldSpec("InstantBuildingEnabled", "boolean"),
    FieldSpec("MaxNumberOfProjections", "integer"),
    FieldSpec("MaxNumberOfBlocks", "integer"),
    FieldSpec("ProjectionsRemaining", "integer"),
    FieldSpec("GetOwnershipFromProjector", "boolean"),
    FieldSpec("Scale", "float"),

    # AI flight and defensive behaviour
    FieldSpec("FleeTrigger", "text"),
    FieldSpec("SelectedBeaconEntityId", "long"),
    FieldSpec("SelectedGpsHash", "text"),
    FieldSpec("WaypointZoneSize", "integer"),
    FieldSpec("LockTarget", "boolean"),
    FieldSpec("CustomFleeCoordinates", "text"),
    FieldSpec("UseCustomFleeCoordinates", "boolean"),
    FieldSpec("SelectedGpsHashNew", "text"),
    FieldSpec("FleeDistance", "float"),
    FieldSpec("EvasiveManeuvers", "boolean"),
    FieldSpec("EvasiveManeuverAngle", "float"),
    FieldSpec("EvasiveManeuverIntervalRange", "float"),
    FieldSpec("FleeMode", "text"),
    FieldSpec("LastKnownEnemyPosition", "text"),
    FieldSpec("FleeMinHeightOnPlanets", "integer"),
    FieldSpec("PrevToolbarState", "boolean"),
    FieldSpec("ParentEntityId", "long"),
    FieldSpec("YieldLastComponent", "boolean"),
)

BLOCK_REGISTRY = FieldRegistry(BLOCK_FIELDS)

__all__ = ["BLOCK_FIELDS", "BLOCK_REGISTRY"]
