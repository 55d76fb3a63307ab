import matplotlib
import matplotlib.animation as animation
import matplotlib.pyplot as plt
import numpy as np

from ..image import squeeze
from ..utils import export
from .layout import draw_subaperture_matrix, extreme_views


def _displayable(img):
    img = np.asarray(img)
    if img.ndim == 3 and img.shape[-1] == 1:
        img = img[..., 0]
    return img


### Plotting
@export
def show_views(lf, *, figsize=None, cmap="gray", labels=True):
    """Show every sub-aperture view of a LightField in one mosaic"""
    views = lf.views()
    fig, ax = plt.subplots(figsize=figsize)
    ax.imshow(_displayable(draw_subaperture_matrix(views)), cmap=cmap)
    ax.set_xticks([lf.nX * (u + 0.5) for u in range(lf.nU)])
    ax.set_yticks([lf.nY * (v + 0.5) for v in range(lf.nV)])
    ax.set_xticklabels(range(lf.nU))
    ax.set_yticklabels(range(lf.nV))
    if labels:
        ax.set_xlabel("u")
        ax.set_ylabel("v", rotation=0)
    return fig


@export
def show_anaglyph(lf, *, figsize=None):
    """Red/cyan anaglyph of the two extreme corner views"""
    left, right = extreme_views(lf.views())
    left, right = left.mean(axis=-1), right.mean(axis=-1)
    rgb = np.stack([left, right, right], axis=-1)
    fig, ax = plt.subplots(figsize=figsize)
    ax.imshow(np.clip(rgb, 0, 1))
    ax.set_axis_off()
    return fig


@export
def show_stack(stack, alphas=None, *, figsize=None, cmap="gray", constant_clim=True):
    """Show focal stack frames side by side"""
    stack = np.asarray(stack)
    nF = stack.shape[0]
    fig, axs = plt.subplots(1, nF, figsize=figsize, squeeze=False)
    cmin, cmax = stack.min(), stack.max()
    for t, ax in enumerate(axs[0]):
        im_art = ax.imshow(_displayable(stack[t]), cmap=cmap)
        if constant_clim and stack.shape[-1] == 1:
            im_art.set_clim(cmin, cmax)
        ax.set_xticks([])
        ax.set_yticks([])
        if alphas is not None:
            ax.set_title(f"α={alphas[t]:g}")
    return fig


@export
def animate_stack(stack, *, figsize=None, cmap="gray", interval=200):
    stack = np.asarray(stack)
    fig, ax = plt.subplots(figsize=figsize)
    ax.set_axis_off()
    avid = ax.imshow(_displayable(stack[0]), cmap=cmap)
    if stack.shape[-1] == 1:
        avid.set_clim(stack.min(), stack.max())
    fig.subplots_adjust(left=0, bottom=0, right=1, top=1, wspace=0, hspace=0)
    plt.close()

    def animate(i):
        avid.set_data(_displayable(stack[i]))
        return (avid,)

    anim = animation.FuncAnimation(
        fig, animate, frames=stack.shape[0], interval=interval, blit=True
    )
    matplotlib.rc("animation", html="jshtml")
    return anim


def show_image(img, *, figsize=None, cmap="gray"):
    """Show a [frame, y, x, c] image, frames side by side"""
    img = np.asarray(img)
    if img.ndim == 4 and img.shape[0] > 1:
        return show_stack(img, figsize=figsize, cmap=cmap)
    fig, ax = plt.subplots(figsize=figsize)
    ax.imshow(squeeze(img), cmap=cmap)
    ax.set_axis_off()
    return fig
