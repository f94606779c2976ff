import matplotlib.pyplot as plt
import numpy as np

from iknet import HiddenLayer, NetworkStructure, NeuralNetwork
from iknet.core.logger import setup_logging
from iknet.data import ArmScaler, make_dataset
from iknet.util.on_epoch import log_every
from iknet.visualize import plot_arm, plot_error_history


random_state = np.random.RandomState(1234)

setup_logging(filename='train-log.txt')

arm_length = 200
center = (400, 400)


# Create a toy dataset ########################################################

arm_examples = make_dataset(1000, arm_length=arm_length, center=center,
                            random_state=random_state)

# The sigmoid outputs live in (0, 1), so both the points and the angles
# are squashed into [0.1, 0.9]
scaler = ArmScaler().fit([example.point for example in arm_examples])
examples = scaler.to_training_examples(arm_examples)

# Set up the network and train it #############################################

network = NeuralNetwork(
    NetworkStructure(
        n_inputs=2,
        hidden_layers=[HiddenLayer(10), HiddenLayer(20),
                       HiddenLayer(20), HiddenLayer(10)],
        n_outputs=2,
    ),
    random_state=random_state,
)

network.train(examples, iterations=200, on_epoch=[log_every(10)])

# Reach for a point ###########################################################

target = np.r_[550., 250.]

alpha, beta = scaler.inverse_transform_angles(
    network.forward(scaler.transform_points(target)))

fig, (ax_error, ax_arm) = plt.subplots(1, 2, figsize=(12, 6))
plot_error_history(network.error_values, ax=ax_error)
plot_arm(alpha, beta, arm_length=arm_length, center=center,
         target=target, ax=ax_arm)

plt.show()
