import matplotlib.pyplot as plt

from radonct import shepp_logan_2d, make_sinogram, reconstruct, apply_filter


def main():
    Nx, Ny = 129, 129
    phantom = shepp_logan_2d(Nx, Ny)
    angular_range = 180
    num_angles = 180

    sinogram = make_sinogram(phantom, angular_range, num_angles)
    reco_bp = reconstruct(sinogram, angular_range)

    sinogram_filt = sinogram.copy()
    apply_filter(sinogram_filt)
    reconstruction = reconstruct(sinogram_filt, angular_range)

    plt.figure(figsize=(16, 4))
    plt.subplot(1, 4, 1)
    plt.imshow(phantom.data, cmap='gray')
    plt.title("Phantom")
    plt.axis('off')
    plt.subplot(1, 4, 2)
    plt.imshow(sinogram.data, aspect='auto', cmap='gray')
    plt.title("Sinogram")
    plt.axis('off')
    plt.subplot(1, 4, 3)
    plt.imshow(reco_bp.data, cmap='gray')
    plt.title("Backprojection")
    plt.axis('off')
    plt.subplot(1, 4, 4)
    plt.imshow(reconstruction.data, cmap='gray')
    plt.title("Filtered Backprojection")
    plt.axis('off')
    plt.tight_layout()
    plt.show()

    # print data range of the phantom and reco
    print("Phantom range:", phantom.data.min(), phantom.data.max())
    print("Reco range:", reconstruction.data.min(), reconstruction.data.max())


if __name__ == "__main__":
    main()
