"""
Example: Analytic Ornstein-Uhlenbeck Paths

This example generates exact-distribution Ornstein-Uhlenbeck paths from the
analytic solution and compares their spread with the conditional mean and
standard deviation of the process.
"""

import numpy as np
import matplotlib.pyplot as plt
from sdetools import generate_ornstein_uhlenbeck, sdeset
from sdetools.utils import ou_mean, ou_variance, sample_moments


def main():
    print("="*70)
    print("SDETools: Analytic Ornstein-Uhlenbeck Process")
    print("="*70)

    # dY = theta*(mu - Y)*dt + sigma*dW
    npaths = 10
    dt = 1e-2
    t = np.arange(0, 1 + dt / 2, dt)
    y0 = np.linspace(-1, 1, npaths)
    theta = 4.0
    mu = 0.0
    sigma = 0.25
    opts = sdeset(RandSeed=1)

    print(f"\n  dY = {theta}*({mu} - Y)*dt + {sigma}*dW")
    print(f"  {npaths} paths, dt = {dt}, t in [{t[0]}, {t[-1]}]")

    Y, W = generate_ornstein_uhlenbeck(theta, mu, sigma, t, y0, opts,
                                       return_wiener=True)

    print(f"\nGenerated paths with shape {Y.shape}")
    print(f"Final values: {np.round(Y[-1], 4)}")

    # Ensemble statistics from a single starting point
    many = generate_ornstein_uhlenbeck(theta, mu, sigma, t, np.full(2000, 1.0),
                                       sdeset(RandSeed=2))
    mean, var = sample_moments(many)
    true_mean = ou_mean(theta, mu, t, 1.0)[:, 0]
    true_std = np.sqrt(ou_variance(theta, sigma, t)[:, 0])
    print(f"\nTerminal sample mean {mean[-1]:.4f} (analytic {true_mean[-1]:.4f})")
    print(f"Terminal sample std  {np.sqrt(var[-1]):.4f} (analytic {true_std[-1]:.4f})")

    fig, axes = plt.subplots(1, 2, figsize=(12, 4))

    axes[0].plot(t[[0, -1]], [mu, mu], 'k-.', linewidth=1)
    axes[0].plot(t, Y, 'b-', linewidth=0.8)
    axes[0].set_xlabel('t')
    axes[0].set_ylabel('y(t)')
    axes[0].set_title(f'Ornstein-Uhlenbeck processes, {npaths} paths, $\\mu$ = {mu}')
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(t, mean, 'r-', label='Sample mean')
    axes[1].fill_between(t, mean - np.sqrt(var), mean + np.sqrt(var),
                         color='r', alpha=0.2, label='Sample $\\pm$1 std')
    axes[1].plot(t, true_mean, 'k--', label='Analytic mean')
    axes[1].plot(t, true_mean + true_std, 'k:', label='Analytic $\\pm$1 std')
    axes[1].plot(t, true_mean - true_std, 'k:')
    axes[1].set_xlabel('t')
    axes[1].set_title('Ensemble from y0 = 1')
    axes[1].legend()
    axes[1].grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig('ornstein_uhlenbeck_paths.png', dpi=150)
    print("\nPlot saved as 'ornstein_uhlenbeck_paths.png'")

    return Y, W


if __name__ == "__main__":
    main()
