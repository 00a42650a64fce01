"""Example: Parameter sweeps — how does power respond to temperature and area?"""

from geopower import Factor, PowerModel, load_oat_config

config = load_oat_config()
model = PowerModel(constants=config.to_constants())
params = config.baseline()
base_power = model.forward(params)

# ── Reservoir temperature sweep (150 → 250 degC) ─────────────────
temp_vals = [150.0 + i * 10.0 for i in range(11)]
temp_powers = model.sweep(params, Factor.RESERVOIR_TEMP, temp_vals)

print("Reservoir Temperature Sweep — reference reservoir")
print(f"{'Temp':>14} {'Power':>10} {'Δ Power':>10}")
print(f"{'degC':>14} {'GWe':>10} {'GWe':>10}")
print("-" * 36)
for t, p in zip(temp_vals, temp_powers):
    print(f"{t:>14.1f} {p:>10.3f} {p - base_power:>+10.3f}")

# ── Area sweep (150 → 300 km^2) ──────────────────────────────────
area_vals = [150.0 + i * 15.0 for i in range(11)]
area_powers = model.sweep(params, Factor.AREA, area_vals)

print("\nArea Sweep — reference reservoir")
print(f"{'Area':>14} {'Power':>10} {'Δ Power':>10}")
print(f"{'km^2':>14} {'GWe':>10} {'GWe':>10}")
print("-" * 36)
for a, p in zip(area_vals, area_powers):
    print(f"{a:>14.1f} {p:>10.3f} {p - base_power:>+10.3f}")
