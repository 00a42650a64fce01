"""Example: OAT sensitivity for the reference reservoir — table + bar charts."""

from geopower import load_oat_config, run_analysis
from geopower.plotting import plot_results
from geopower.report import print_table

config = load_oat_config()
results = run_analysis(config)

print(f"Perturbation: +{config.perturbation * 100:.0f}% per factor")
print(f"Baseline power capacity: {results[0].baseline_power:.3f} GWe\n")
print_table(results)

plot_results(results, path="oat_sensitivity.png")
print("\nSaved oat_sensitivity.png")
