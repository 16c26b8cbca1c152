# src/delay_coord/qc.py
import os, numpy as np
import matplotlib.pyplot as plt
import smplotlib  # noqa: F401

def axis_labels(n_cols: int, n_components: int = 1):
    """Column labels of a flattened embedding with n_components per sample."""
    if n_components == 1:
        return ["$x_t$"] + [f"$x_{{t-{k}\\tau}}$" if k > 1 else "$x_{t-\\tau}$" for k in range(1, n_cols)]
    return [f"col {j + 1}" for j in range(n_cols)]

def save_embedding_scatter(figpath: str, X: np.ndarray, title: str = "Delay embedding",
                           n_components: int = 1) -> bool:
    """
    Scatter of an embedded trajectory X (n_points, n_cols).
    2 columns are drawn as-is, 3 in 3D; wider embeddings are projected on
    their first 3 principal components. Delay labels are used only for
    scalar samples (n_components == 1). Returns False (nothing written) when
    X has fewer than 2 points or 2 columns.
    """
    X = np.asarray(X, dtype = float)
    if X.ndim != 2 or X.shape[0] < 2 or X.shape[1] < 2:
        return False
    if X.shape[1] > 3:
        from sklearn.decomposition import PCA
        k = min(3, X.shape[0])
        P = PCA(n_components = k).fit_transform(X)
        labels = ["PC1", "PC2", "PC3"]
    else:
        P = X
        labels = axis_labels(X.shape[1], n_components)
    if P.shape[1] == 2:
        plt.figure()
        plt.plot(P[:,0], P[:,1], lw = 0.5, alpha = 0.5)
        plt.scatter(P[:,0], P[:,1], s = 4, alpha = 0.6)
        plt.xlabel(labels[0]); plt.ylabel(labels[1]); plt.title(title)
    else:
        from mpl_toolkits.mplot3d import Axes3D  # noqa
        ax = plt.figure().add_subplot(111, projection = "3d")
        ax.scatter(P[:,0], P[:,1], P[:,2], s = 4, alpha = 0.6)
        ax.set_xlabel(labels[0]); ax.set_ylabel(labels[1]); ax.set_zlabel(labels[2])
        ax.set_title(title)
    d = os.path.dirname(figpath)
    if d:
        os.makedirs(d, exist_ok = True)
    plt.tight_layout()
    plt.savefig(figpath)
    plt.close("all")
    return True
