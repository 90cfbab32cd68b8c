"""debrisrisk quickstart: assess an ISS-like orbit and find the dominant inputs."""

from debrisrisk import ParameterSet, assess, sensitivity

# ISS (ZARYA) TLE
ISS_LINE1 = "1 25544U 98067A   24045.54896019  .00016717  00000-0  30093-3 0  9993"
ISS_LINE2 = "2 25544  51.6412 207.4925 0004948 290.5508 178.9792 15.49583488439596"

params = ParameterSet.from_tle(ISS_LINE1, ISS_LINE2, spatial_density=1e-11)
result = assess(params)

print(f"Altitude:    {params.orbital_altitude:.1f} km")
print(f"Inclination: {params.orbital_inclination:.2f}°")
print(f"Duration:    {result.mission_duration_years:.1f} years")
print(f"Pc:          {result.formatted_percent()} ({result.tier.value} Risk)")
print(f"Regime:      {result.orbital_regime.value}")
print(f"Environment: {result.debris_environment.value}")

for bar in sensitivity(params)[:3]:
    print(f"{bar.name:>26}: {bar.percent_at_low:.4f}% .. {bar.percent_at_high:.4f}%")
